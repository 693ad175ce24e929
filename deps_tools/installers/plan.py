from dataclasses import dataclass
from typing import Optional, Tuple

from deps_tools.dependencies import Dependency


@dataclass(frozen=True)
class InstallPlan:
    """
    What it takes to install one dependency on one platform.

    Either a list of shell commands to run in order (after the refresh
    commands), or a manual download URL for platforms where we don't
    install automatically.
    """

    dependency: Dependency
    commands: Tuple[str, ...] = ()
    refresh: Tuple[str, ...] = ()
    manual_url: Optional[str] = None

    @property
    def is_manual(self) -> bool:
        return self.manual_url is not None

    @classmethod
    def manual(cls, dependency: Dependency, url: str) -> "InstallPlan":
        return cls(dependency=dependency, manual_url=url)
