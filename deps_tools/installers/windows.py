"""
Windows Installer

Nothing is installed automatically on Windows; every dependency points
the user at its download page.
"""

from deps_tools.constants import DOCKER_URLS, GIT_WINDOWS_URL, HEROKU_URL
from deps_tools.dependencies import Dependency
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.os_utils import get_platform_key

MANUAL_URLS = {
    Dependency.GIT: GIT_WINDOWS_URL,
    Dependency.DOCKER: DOCKER_URLS[get_platform_key("windows")],
    Dependency.HEROKU: HEROKU_URL,
}


def get_install_plan(dependency: Dependency) -> InstallPlan:
    return InstallPlan.manual(dependency, MANUAL_URLS[dependency])
