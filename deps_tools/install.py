"""
Installer routines

One routine per dependency. Each looks up the plan for the host OS and
either runs it through the shell executor or shows the manual download
page when the platform has no automatic install.
"""

import logging
from typing import Optional

from deps_tools.config import Settings
from deps_tools.dependencies import Dependency
from deps_tools.executor import run_install
from deps_tools.installers import get_install_plan
from deps_tools.messages import show_installation_info
from deps_tools.utils.status_reporter import StatusReporter

logger = logging.getLogger(__name__)


def _install(dependency: Dependency, reporter: StatusReporter, os_type: Optional[str], settings: Optional[Settings]) -> bool:
    """Returns True if something was installed, False if the user was sent to a URL."""
    plan = get_install_plan(dependency, os_type)
    if plan.is_manual:
        logger.info("No automatic install for %s here, showing %s", dependency.value, plan.manual_url)
        show_installation_info(dependency.value, reporter, plan.manual_url)
        return False
    run_install(plan, reporter, settings)
    return True


def install_git(reporter: StatusReporter, os_type: Optional[str] = None, settings: Optional[Settings] = None) -> bool:
    return _install(Dependency.GIT, reporter, os_type, settings)


def install_docker(reporter: StatusReporter, os_type: Optional[str] = None, settings: Optional[Settings] = None) -> bool:
    return _install(Dependency.DOCKER, reporter, os_type, settings)


def install_heroku(reporter: StatusReporter, os_type: Optional[str] = None, settings: Optional[Settings] = None) -> bool:
    return _install(Dependency.HEROKU, reporter, os_type, settings)


INSTALLERS = {
    Dependency.GIT: install_git,
    Dependency.DOCKER: install_docker,
    Dependency.HEROKU: install_heroku,
}
