import logging
import subprocess
from typing import Optional

from deps_tools.config import Settings
from deps_tools.constants import INSTALL_FAIL, INSTALL_SUCCESS
from deps_tools.errors import InstallError
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.status_reporter import StatusReporter

logger = logging.getLogger(__name__)


def _run(cmd: str) -> None:
    logger.info("RUN: %s", cmd)
    try:
        # stdin/stdout/stderr are inherited so the user sees the package manager live
        result = subprocess.run(cmd, shell=True)
    except (OSError, subprocess.SubprocessError) as e:
        raise InstallError(cmd) from e
    if result.returncode != 0:
        raise InstallError(cmd, result.returncode)


def run_install(plan: InstallPlan, reporter: StatusReporter, settings: Optional[Settings] = None) -> None:
    """
    Run the plan's refresh commands and then its install commands, in order.

    Stops at the first failure: the reporter shows the failure and an
    InstallError is raised. Nothing that already ran is undone.
    """
    settings = settings or Settings()
    commands = list(plan.commands)
    if settings.refresh_index:
        commands = list(plan.refresh) + commands
    elif plan.refresh:
        logger.info("Skipping package index refresh for %s", plan.dependency.value)

    # The package managers may prompt (apt's [Y/n], sudo's password); the spinner must not redraw over them
    reporter.hand_over()
    try:
        for cmd in commands:
            _run(cmd)
    except InstallError as e:
        logger.error("Installing %s failed: %s", plan.dependency.value, e)
        reporter.fail(INSTALL_FAIL)
        raise

    reporter.succeed(INSTALL_SUCCESS)
