from enum import Enum

from deps_tools.constants import DOCKER_PROBE, GIT_PROBE, HEROKU_PROBE
from deps_tools.errors import UnknownDependencyError


class Dependency(str, Enum):
    """The closed set of dependencies this tool knows how to install."""

    GIT = "git"
    DOCKER = "docker"
    HEROKU = "heroku-cli"

    @property
    def probe(self) -> str:
        return PROBES[self]

    @classmethod
    def from_probe(cls, probe_command: str) -> "Dependency":
        """Exact match on the probe command; anything else is an error."""
        for dependency, probe in PROBES.items():
            if probe == probe_command:
                return dependency
        raise UnknownDependencyError(probe_command)

    @classmethod
    def from_name(cls, name: str) -> "Dependency":
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownDependencyError(name) from None


PROBES = {
    Dependency.GIT: GIT_PROBE,
    Dependency.DOCKER: DOCKER_PROBE,
    Dependency.HEROKU: HEROKU_PROBE,
}
