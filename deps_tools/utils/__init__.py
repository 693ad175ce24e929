from .os_utils import get_os_type, get_platform_key, IS_WINDOWS, IS_LINUX, IS_MAC
from .status_reporter import StatusReporter

__all__ = [
    'get_os_type',
    'get_platform_key',
    'IS_WINDOWS',
    'IS_LINUX',
    'IS_MAC',
    'StatusReporter'
]
