"""Persistent storage of the flake registry.

The registry lives in `<config dir>/config.csv`:

    name,path,enabled
    dots,/home/me/dots,true
    server,/srv/flake,false

Writes go to `config.tmp` in the same directory, which is then renamed over
`config.csv`, so the real file is never observed half-written.
"""

import csv
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from snowplow.core.errors import IoFailure, MalformedStorage
from snowplow.core.types import Flake

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.csv"
FIELDNAMES = ("name", "path", "enabled")
# Paths that are not valid UTF-8 keep their raw bytes on disk.
PATH_ERRORS = "surrogateescape"

_BOOLEAN_LITERALS = {"true": True, "false": False}


class RegistryStore(ABC):
    """Abstract interface for registry storage.

    Provides dependency injection for registry persistence, enabling
    in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def ensure_exists(self) -> None:
        """Create an empty store if none exists yet."""
        ...

    @abstractmethod
    def load(self) -> list[Flake]:
        """Load every stored record, in storage order.

        Duplicate names are returned as-is; deduplication is the registry's job.

        Raises:
            IoFailure: If the store cannot be read
            MalformedStorage: If a record cannot be parsed
        """
        ...

    @abstractmethod
    def save(self, flakes: Iterable[Flake]) -> None:
        """Replace the stored records atomically.

        Raises:
            IoFailure: If the store cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path of the backing file (for messages and debugging)."""
        ...


class FilesystemRegistryStore(RegistryStore):
    """Production implementation backed by a CSV file in the config directory."""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir

    def ensure_exists(self) -> None:
        config_path = self.path()
        if config_path.exists():
            return

        logger.debug("Creating registry at %s", config_path)
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with config_path.open("x", newline="", encoding="utf-8", errors=PATH_ERRORS) as f:
                csv.writer(f).writerow(FIELDNAMES)
        except OSError as e:
            raise IoFailure(str(self._config_dir), e) from e

    def load(self) -> list[Flake]:
        config_path = self.path()
        flakes: list[Flake] = []
        try:
            with config_path.open(newline="", encoding="utf-8", errors=PATH_ERRORS) as f:
                reader = csv.DictReader(f)
                if reader.fieldnames is None:
                    return flakes
                if tuple(reader.fieldnames) != FIELDNAMES:
                    raise MalformedStorage(
                        config_path,
                        f"expected header {','.join(FIELDNAMES)}, "
                        f"found {','.join(reader.fieldnames)}",
                    )
                for row in reader:
                    flakes.append(_parse_row(config_path, reader.line_num, row))
        except csv.Error as e:
            raise MalformedStorage(config_path, str(e)) from e
        except OSError as e:
            raise IoFailure(str(config_path), e) from e

        logger.debug("Loaded %d record(s) from %s", len(flakes), config_path)
        return flakes

    def save(self, flakes: Iterable[Flake]) -> None:
        tmp_path = self._write_temp(flakes)
        self._commit(tmp_path)

    def path(self) -> Path:
        return self._config_dir / CONFIG_FILE

    def _write_temp(self, flakes: Iterable[Flake]) -> Path:
        tmp_path = self.path().with_suffix(".tmp")
        try:
            with tmp_path.open("w", newline="", encoding="utf-8", errors=PATH_ERRORS) as f:
                writer = csv.writer(f)
                writer.writerow(FIELDNAMES)
                for flake in flakes:
                    writer.writerow([flake.name, str(flake.path), str(flake.enabled).lower()])
        except OSError as e:
            raise IoFailure(str(tmp_path), e) from e
        return tmp_path

    def _commit(self, tmp_path: Path) -> None:
        try:
            tmp_path.replace(self.path())
        except OSError as e:
            raise IoFailure(str(tmp_path), e) from e
        logger.debug("Saved registry to %s", self.path())


def _parse_row(config_path: Path, line_num: int, row: dict[str, str | None]) -> Flake:
    name = row.get("name")
    path = row.get("path")
    enabled = row.get("enabled")

    if not name:
        raise MalformedStorage(config_path, f"line {line_num}: missing flake name")
    if not path:
        raise MalformedStorage(config_path, f"line {line_num}: missing path for `{name}`")
    if enabled not in _BOOLEAN_LITERALS:
        raise MalformedStorage(
            config_path,
            f"line {line_num}: invalid enabled value {enabled!r} for `{name}`",
        )

    return Flake(name=name, path=Path(path), enabled=_BOOLEAN_LITERALS[enabled])


class InMemoryRegistryStore(RegistryStore):
    """Test implementation that stores records in memory without touching filesystem."""

    def __init__(self, flakes: list[Flake] | None = None) -> None:
        """Initialize in-memory store.

        Args:
            flakes: Initial records (None = store doesn't exist yet)
        """
        self._flakes = list(flakes) if flakes is not None else None
        self._save_count = 0

    @property
    def flakes(self) -> list[Flake]:
        """Records currently stored (for test assertions)."""
        return list(self._flakes or [])

    @property
    def save_count(self) -> int:
        """Number of save() calls made (for test assertions)."""
        return self._save_count

    def ensure_exists(self) -> None:
        if self._flakes is None:
            self._flakes = []

    def load(self) -> list[Flake]:
        return list(self._flakes or [])

    def save(self, flakes: Iterable[Flake]) -> None:
        self._flakes = list(flakes)
        self._save_count += 1

    def path(self) -> Path:
        return Path("/fake/snow-plow/config.csv")
