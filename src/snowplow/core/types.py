"""Value types shared by the registry, its storage and the updater."""

from dataclasses import dataclass
from pathlib import Path

from snowplow.core.diagnostics import ErrorRecord


@dataclass(frozen=True)
class Flake:
    """A flake tracked by snow-plow. Disabled flakes are skipped by batch updates.

    Attributes:
        name: Unique identifier of the entry
        path: Absolute path of the flake directory
        enabled: Whether `snow-plow update` acts on this flake
    """

    name: str
    path: Path
    enabled: bool


@dataclass(frozen=True)
class FlakeFailure:
    """A flake whose update failed during a batch update."""

    name: str
    path: Path
    records: tuple[ErrorRecord, ...]
