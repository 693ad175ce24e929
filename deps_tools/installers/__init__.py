from typing import Optional

from deps_tools.dependencies import Dependency
from deps_tools.errors import UnsupportedPlatformError
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.os_utils import get_os_type

# Map OS type to the module holding its command table
OS_MODULE_MAP = {
    "windows": "windows",
    "linux": "linux",
    "mac": "mac",
}


def get_install_plan(dependency: Dependency, os_type: Optional[str] = None) -> InstallPlan:
    """Look up the install plan for a dependency on the given (or current) OS."""
    os_type = os_type or get_os_type()
    module_os = OS_MODULE_MAP.get(os_type)
    if module_os is None:
        raise UnsupportedPlatformError(os_type)

    # Import the correct installer module (e.g., deps_tools.installers.mac)
    module_path = f"deps_tools.installers.{module_os}"
    installer_module = __import__(module_path, fromlist=["get_install_plan"])
    return installer_module.get_install_plan(dependency)


__all__ = ["InstallPlan", "get_install_plan", "OS_MODULE_MAP"]
