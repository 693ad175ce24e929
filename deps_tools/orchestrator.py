"""
Installation Orchestrator

Checks a dependency, asks before installing it, and hands off to the
matching installer routine. Called once per dependency, one at a time.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from deps_tools.checker import ProbeStatus, probe
from deps_tools.config import Settings
from deps_tools.constants import INSTALL_PROMPT, INSTALLING
from deps_tools.dependencies import Dependency
from deps_tools.install import INSTALLERS
from deps_tools.messages import dependency_not_installed
from deps_tools.prompts import ask
from deps_tools.utils.status_reporter import StatusReporter

logger = logging.getLogger(__name__)

ANSWER_KEY = "install_dependency"


class InstallOutcome(str, Enum):
    ALREADY_INSTALLED = "already_installed"
    DECLINED = "declined"
    INSTALLED = "installed"
    MANUAL = "manual"


def _confirm_install(dependency: Dependency, ask_fn: Callable, settings: Settings) -> bool:
    if settings.assume_yes:
        logger.info("Installing %s without asking (assume yes)", dependency.value)
        return True
    answers = ask_fn([
        {
            "type": "confirm",
            "name": ANSWER_KEY,
            "message": INSTALL_PROMPT.format(dependency=dependency.value),
        }
    ])
    return bool(answers.get(ANSWER_KEY))


def ensure_installed(
    probe_command: str,
    reporter: Optional[StatusReporter] = None,
    ask_fn: Optional[Callable] = None,
    os_type: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> InstallOutcome:
    """
    Make sure the dependency behind ``probe_command`` is installed.

    Raises UnknownDependencyError for a probe outside the known set (before
    anything runs), UnsupportedPlatformError for an unknown OS and
    InstallError when a package-manager command fails.
    """
    dependency = Dependency.from_probe(probe_command)
    settings = settings or Settings()

    status = probe(probe_command)
    if status is ProbeStatus.PRESENT:
        logger.debug("%s is already installed", dependency.value)
        return InstallOutcome.ALREADY_INSTALLED
    if status is ProbeStatus.PROBE_ERROR:
        logger.warning("Could not check for %s; treating it as not installed", dependency.value)

    if not _confirm_install(dependency, ask_fn or ask, settings):
        dependency_not_installed(dependency.value)
        return InstallOutcome.DECLINED

    reporter = reporter or StatusReporter()
    reporter.start(INSTALLING.format(dependency=dependency.value))
    try:
        installed = INSTALLERS[dependency](reporter, os_type=os_type, settings=settings)
    finally:
        reporter.stop()
    return InstallOutcome.INSTALLED if installed else InstallOutcome.MANUAL


def ensure_all(
    probe_commands: Iterable[str],
    on_outcome: Optional[Callable[[Dependency, InstallOutcome], None]] = None,
    **kwargs,
) -> Dict[Dependency, InstallOutcome]:
    """
    Run ensure_installed for each probe in order; the first error stops the run.

    ``on_outcome`` is called after each dependency is settled, so callers can
    report progress before a later dependency fails.
    """
    outcomes = {}
    for probe_command in probe_commands:
        dependency = Dependency.from_probe(probe_command)
        outcomes[dependency] = ensure_installed(probe_command, **kwargs)
        if on_outcome is not None:
            on_outcome(dependency, outcomes[dependency])
    return outcomes
