"""Command variants and their dispatch over a loaded registry.

Every CLI command maps to one frozen dataclass below. dispatch() performs the
command against an already loaded registry; execute() wraps it with loading
and the single persistence step, and marks the outcome as persisted so the
caller can tell the save really happened.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from snowplow.core.context import SnowPlowContext
from snowplow.core.errors import InternalInconsistency, NoStorageLocation
from snowplow.core.registry import FlakeRegistry
from snowplow.core.runner import Runner
from snowplow.core.types import Flake, FlakeFailure
from snowplow.core.updater import BatchUpdater


class ListFilter(Enum):
    ALL = "all"
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class Add:
    name: str
    path: Path


@dataclass(frozen=True)
class Enable:
    name: str


@dataclass(frozen=True)
class Disable:
    name: str


@dataclass(frozen=True)
class Remove:
    name: str


@dataclass(frozen=True)
class Update:
    """Update one flake by name, or every enabled flake when name is None."""

    name: str | None = None


@dataclass(frozen=True)
class ListFlakes:
    filter: ListFilter = ListFilter.ALL


@dataclass(frozen=True)
class Info:
    name: str


Command = Add | Enable | Disable | Remove | Update | ListFlakes | Info


@dataclass(frozen=True)
class CommandOutcome:
    """Uniform result of a command.

    Attributes:
        failures: Flakes that failed during a batch update
        attempted: Number of enabled flakes a batch update went through
        flakes: Flakes selected for display by list and info
        persisted: Whether the registry was saved after the command ran
    """

    failures: tuple[FlakeFailure, ...] = ()
    attempted: int = 0
    flakes: tuple[Flake, ...] = ()
    persisted: bool = False


def dispatch(ctx: SnowPlowContext, registry: FlakeRegistry, command: Command) -> CommandOutcome:
    """Run a command against a loaded registry, without persisting it.

    Raises:
        SnowPlowError: For failures that abort the command; the registry is
            then left unsaved so storage keeps its previous state
    """
    runner = Runner(ctx.nix, ctx.feedback)

    match command:
        case Add(name=name, path=path):
            registry.add(name, path, runner)
        case Enable(name=name):
            registry.enable(name)
        case Disable(name=name):
            registry.disable(name)
        case Remove(name=name):
            registry.remove(name)
        case Update(name=None):
            attempted = sum(1 for flake in registry if flake.enabled)
            failures = BatchUpdater(registry, runner, ctx.feedback).update_all()
            return CommandOutcome(failures=tuple(failures), attempted=attempted)
        case Update(name=name):
            BatchUpdater(registry, runner, ctx.feedback).update_one(name)
        case ListFlakes(filter=list_filter):
            return CommandOutcome(flakes=tuple(_select(registry, list_filter)))
        case Info(name=name):
            return CommandOutcome(flakes=(registry.get(name),))
        case _:
            raise InternalInconsistency(f"unhandled command {command!r}")

    return CommandOutcome()


def execute(ctx: SnowPlowContext, command: Command) -> CommandOutcome:
    """Load the registry, run the command, then persist the registry once.

    Persistence happens whenever the command returns, including batch
    updates with failed flakes.

    Raises:
        NoStorageLocation: If the context has no registry store
        SnowPlowError: From dispatch(), before anything is persisted
    """
    if ctx.store is None:
        raise NoStorageLocation()

    registry = FlakeRegistry.load(ctx.store, ctx.feedback)
    outcome = dispatch(ctx, registry, command)
    registry.persist()
    return dataclasses.replace(outcome, persisted=registry.persisted)


def _select(registry: FlakeRegistry, list_filter: ListFilter) -> list[Flake]:
    match list_filter:
        case ListFilter.ENABLED:
            return [flake for flake in registry if flake.enabled]
        case ListFilter.DISABLED:
            return [flake for flake in registry if not flake.enabled]
        case _:
            return list(registry)
