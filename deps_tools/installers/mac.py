"""
Mac Installer

Homebrew for git and the heroku CLI; Docker Desktop is a manual download.
Homebrew refreshes its own index, so there is no separate refresh step.
"""

from deps_tools.constants import DOCKER_URLS
from deps_tools.dependencies import Dependency
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.os_utils import get_platform_key

REFRESH_COMMANDS = ()


def get_install_plan(dependency: Dependency) -> InstallPlan:
    if dependency is Dependency.DOCKER:
        return InstallPlan.manual(dependency, DOCKER_URLS[get_platform_key("mac")])
    if dependency is Dependency.GIT:
        commands = ("brew install git",)
    else:
        # Tap first, then install from it
        commands = ("brew tap heroku/brew", "brew install heroku")
    return InstallPlan(dependency=dependency, commands=commands, refresh=REFRESH_COMMANDS)
