from .checker import ProbeStatus, is_installed, probe
from .dependencies import Dependency
from .errors import DependencyError, InstallError, UnknownDependencyError, UnsupportedPlatformError
from .orchestrator import InstallOutcome, ensure_all, ensure_installed
from .validate import is_valid_input

__all__ = [
    'Dependency',
    'DependencyError',
    'InstallError',
    'InstallOutcome',
    'ProbeStatus',
    'UnknownDependencyError',
    'UnsupportedPlatformError',
    'ensure_all',
    'ensure_installed',
    'is_installed',
    'is_valid_input',
    'probe'
]
