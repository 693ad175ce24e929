"""
Linux Installer

apt for git and docker, snap for the heroku CLI. The apt package index is
refreshed before any install command runs.
"""

import logging

from deps_tools.dependencies import Dependency
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.os_utils import get_available_package_manager, get_linux_distro, get_os_type, is_snap_available

logger = logging.getLogger(__name__)

REFRESH_COMMANDS = ("sudo apt update",)

INSTALL_COMMANDS = {
    Dependency.GIT: ("apt install git",),
    Dependency.DOCKER: ("apt install docker.io",),
    Dependency.HEROKU: ("snap install --classic heroku",),
}


def get_install_plan(dependency: Dependency) -> InstallPlan:
    commands = INSTALL_COMMANDS[dependency]

    # Heads-up only, and only when this host is the Linux box being planned for
    if get_os_type() == "linux":
        if get_available_package_manager() != "apt":
            logger.warning("apt not found on this %s system; install may fail", get_linux_distro())
        if dependency is Dependency.HEROKU and not is_snap_available():
            logger.warning("snap not found; 'snap install' for %s may fail", dependency.value)

    return InstallPlan(dependency=dependency, commands=commands, refresh=REFRESH_COMMANDS)
