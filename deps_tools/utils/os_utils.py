import platform
import shutil
import sys
from typing import Optional

import distro  # requires 'distro' package on Linux


def get_os_type() -> str:
    """
    Return a simplified OS name: 'windows', 'mac', or 'linux'
    """
    os_name = platform.system().lower()
    if os_name == "windows":
        return "windows"   # Windows (win32/amd64)
    elif os_name == "darwin":
        return "mac"       # macOS
    elif os_name == "linux":
        return "linux"     # Linux
    else:
        return "unknown"   # Fallback for unsupported platforms


def is_windows() -> bool:
    return get_os_type() == "windows"


def is_linux() -> bool:
    return get_os_type() == "linux"


def is_mac() -> bool:
    return get_os_type() == "mac"


# Derived once at import; installers take an explicit os_type when they need another one
IS_WINDOWS = is_windows()
IS_LINUX = is_linux()
IS_MAC = is_mac()


PLATFORM_KEYS = {
    "windows": "win32",
    "mac": "darwin",
    "linux": "linux",
}


def get_platform_key(os_type: Optional[str] = None) -> str:
    """
    Raw platform string ('win32', 'darwin', 'linux') used for URL lookups.
    Without an os_type this is the host's own sys.platform.
    """
    if os_type is None:
        return sys.platform
    return PLATFORM_KEYS.get(os_type, os_type)


def get_linux_distro() -> str:
    """
    Detect the specific Linux distribution using `distro` library.
    Returns simplified names like 'ubuntu', 'fedora', etc.
    """
    id_like = distro.id().lower()  # e.g., ubuntu, debian, fedora
    if "ubuntu" in id_like or "debian" in id_like:
        return "ubuntu"
    elif "fedora" in id_like or "rhel" in id_like or "centos" in id_like:
        return "fedora"
    elif "arch" in id_like:
        return "arch"
    elif "alpine" in id_like:
        return "alpine"
    else:
        return id_like  # return raw id if unrecognized


def get_available_package_manager() -> str:
    """
    Detect the available package manager based on OS or distro.
    Returns one of: 'apt', 'snap', 'brew', or 'unknown'.
    """
    os_type = get_os_type()

    if os_type == "linux":
        if shutil.which("apt"):
            return "apt"     # Debian/Ubuntu
        elif shutil.which("snap"):
            return "snap"
        else:
            return "unknown"

    elif os_type == "mac":
        # Homebrew on macOS
        return "brew" if shutil.which("brew") else "unknown"

    return "unknown"


def is_snap_available() -> bool:
    """
    Check if 'snap' package manager is installed and available on the system.
    """
    return shutil.which("snap") is not None  # snap present on PATH
