from typing import Optional

from deps_tools.constants import UNKNOWN_DEPENDENCY, UNSUPPORTED_OS


class DependencyError(Exception):
    """Base class for everything that stops a dependency from being set up."""


class UnknownDependencyError(DependencyError):
    def __init__(self, dependency: str):
        self.dependency = dependency
        super().__init__(UNKNOWN_DEPENDENCY.format(dependency=dependency))


class UnsupportedPlatformError(DependencyError):
    def __init__(self, os_type: str):
        self.os_type = os_type
        super().__init__(UNSUPPORTED_OS.format(os=os_type))


class InstallError(DependencyError):
    """A package-manager command exited non-zero or could not be started."""

    def __init__(self, command: str, returncode: Optional[int] = None):
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"Command could not be started: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command}"
        super().__init__(message)
