"""nix operations interface.

Architecture:
- Nix: Abstract base class defining the interface
- RealNix: Production implementation using subprocess
- FakeNix: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NixResult:
    """Exit status and diagnostic stream of one nix invocation."""

    returncode: int
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class Nix(ABC):
    """Abstract interface for the nix flake subcommands snow-plow relies on.

    Implementations return the raw result; interpreting stderr is the
    Runner's job. Failing to start the process raises IoFailure.
    """

    @abstractmethod
    def flake_show(self, path: Path) -> NixResult:
        """Run `nix flake show` on a flake directory.

        Used only to validate that a usable flake exists at `path`.
        """
        ...

    @abstractmethod
    def flake_update(self, path: Path) -> NixResult:
        """Run `nix flake update` on a flake directory, rewriting its lock file."""
        ...
