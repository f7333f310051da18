"""The in-memory flake registry and its load/mutate/persist lifecycle.

A FlakeRegistry is loaded once per command invocation, mutated by at most one
command, and persisted exactly once before the process exits normally.
"""

import dataclasses
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from snowplow.core.errors import DuplicateName, InvalidName, UnknownName
from snowplow.core.runner import Runner
from snowplow.core.store import RegistryStore
from snowplow.core.types import Flake
from snowplow.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class FlakeRegistry:
    """Mapping from flake name to Flake, backed by a RegistryStore.

    Iteration follows insertion order, which is storage order for loaded
    flakes.
    """

    def __init__(
        self,
        store: RegistryStore,
        feedback: UserFeedback,
        flakes: dict[str, Flake] | None = None,
    ) -> None:
        self._store = store
        self._feedback = feedback
        self._flakes = flakes if flakes is not None else {}
        self._persisted = False

    @classmethod
    def load(cls, store: RegistryStore, feedback: UserFeedback) -> "FlakeRegistry":
        """Load the registry, creating an empty store first if none exists.

        A record repeating an already loaded name is dropped with a warning;
        the first record for a name wins.

        Raises:
            IoFailure: If the store cannot be created or read
            MalformedStorage: If a stored record cannot be parsed
        """
        store.ensure_exists()

        flakes: dict[str, Flake] = {}
        for flake in store.load():
            if flake.name in flakes:
                feedback.warning(
                    f"flake `{flake.name}` is present several times in the file. "
                    f'"{flake.path}" has been removed.'
                )
                continue
            flakes[flake.name] = flake

        return cls(store, feedback, flakes)

    @property
    def persisted(self) -> bool:
        return self._persisted

    def __iter__(self) -> Iterator[Flake]:
        return iter(list(self._flakes.values()))

    def __len__(self) -> int:
        return len(self._flakes)

    def __contains__(self, name: object) -> bool:
        return name in self._flakes

    def find(self, name: str) -> Flake | None:
        return self._flakes.get(name)

    def get(self, name: str) -> Flake:
        """Get a tracked flake.

        Raises:
            UnknownName: If no flake has this name
        """
        flake = self._flakes.get(name)
        if flake is None:
            raise UnknownName(name)
        return flake

    def add(self, name: str, location: Path, runner: Runner) -> Flake:
        """Track a new flake after checking that nix can evaluate it.

        The location is made absolute (without resolving symlinks) only once
        the check succeeded.

        Raises:
            InvalidName: If the name is empty
            DuplicateName: If a flake with this name is already tracked
            ExternalToolFailure: If `nix flake show` rejects the location
        """
        if not name:
            raise InvalidName(name)
        if name in self._flakes:
            raise DuplicateName(name)

        runner.check(location)

        flake = Flake(name=name, path=Path(os.path.abspath(location)), enabled=True)
        self._flakes[name] = flake
        logger.debug("Added flake %s at %s", name, flake.path)
        return flake

    def enable(self, name: str) -> None:
        self._set_enabled(name, enabled=True)

    def disable(self, name: str) -> None:
        self._set_enabled(name, enabled=False)

    def remove(self, name: str) -> None:
        """Stop tracking a flake. Removing an unknown name only warns."""
        if self._flakes.pop(name, None) is None:
            self._feedback.warning(f"flake `{name}` does not exist")

    def persist(self) -> None:
        """Write every flake back to the store."""
        self._store.save(self._flakes.values())
        self._persisted = True

    def _set_enabled(self, name: str, *, enabled: bool) -> None:
        flake = self.get(name)
        if flake.enabled == enabled:
            state = "enabled" if enabled else "disabled"
            self._feedback.warning(f"flake `{name}` is already {state}")
            return
        self._flakes[name] = dataclasses.replace(flake, enabled=enabled)
