import logging
import subprocess
from enum import Enum

logger = logging.getLogger(__name__)


class ProbeStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    PROBE_ERROR = "probe_error"


def probe(command: str) -> ProbeStatus:
    """
    Run a probe command through the shell and classify the result.

    Exit code zero means the tool is there. Any other exit code means it is
    absent. If the shell itself cannot be started the result is PROBE_ERROR.
    Never raises.
    """
    try:
        result = subprocess.run(command, shell=True, capture_output=True, text=True)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Probe '%s' could not run: %s", command, e)
        return ProbeStatus.PROBE_ERROR

    status = ProbeStatus.PRESENT if result.returncode == 0 else ProbeStatus.ABSENT
    logger.debug("Probe '%s' exited %s -> %s", command, result.returncode, status.value)
    return status


def is_installed(command: str) -> bool:
    """True only when the probe command exits zero."""
    return probe(command) is ProbeStatus.PRESENT
