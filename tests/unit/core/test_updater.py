"""Tests for BatchUpdater."""

from pathlib import Path

import pytest

from snowplow.core.diagnostics import ErrorRecord
from snowplow.core.errors import ExternalToolFailure, IoFailure, UnknownEntry
from snowplow.core.nix.abc import NixResult
from snowplow.core.nix.fake import FakeNix
from snowplow.core.registry import FlakeRegistry
from snowplow.core.runner import Runner
from snowplow.core.store import InMemoryRegistryStore
from snowplow.core.types import Flake, FlakeFailure
from snowplow.core.updater import BatchUpdater
from tests.fakes.user_feedback import FakeUserFeedback


def _updater(nix: FakeNix, *flakes: Flake) -> tuple[BatchUpdater, FakeUserFeedback]:
    feedback = FakeUserFeedback()
    registry = FlakeRegistry.load(InMemoryRegistryStore(list(flakes)), feedback)
    return BatchUpdater(registry, Runner(nix, feedback), feedback), feedback


def test_update_all_continues_past_a_failing_flake() -> None:
    """The second flake fails; the first and third are still updated."""
    first, second, third = Path("/a"), Path("/b"), Path("/c")
    nix = FakeNix(update_results={second: NixResult(returncode=1, stderr="error: broken lock\n")})
    updater, feedback = _updater(
        nix,
        Flake(name="a", path=first, enabled=True),
        Flake(name="b", path=second, enabled=True),
        Flake(name="c", path=third, enabled=True),
    )

    failures = updater.update_all()

    assert nix.update_calls == [first, second, third]
    assert failures == [
        FlakeFailure(name="b", path=second, records=(ErrorRecord(title="error: broken lock"),))
    ]
    assert feedback.errors == ["error: broken lock"]


def test_update_all_skips_disabled_and_reports_progress() -> None:
    nix = FakeNix()
    updater, feedback = _updater(
        nix,
        Flake(name="a", path=Path("/a"), enabled=True),
        Flake(name="off", path=Path("/off"), enabled=False),
        Flake(name="c", path=Path("/c"), enabled=True),
    )

    failures = updater.update_all()

    assert failures == []
    assert nix.update_calls == [Path("/a"), Path("/c")]
    assert feedback.infos == [
        'updating flake `a` at "/a" 1/2',
        'updating flake `c` at "/c" 2/2',
    ]


def test_update_all_with_no_enabled_flake_does_nothing() -> None:
    nix = FakeNix()
    updater, feedback = _updater(nix, Flake(name="off", path=Path("/off"), enabled=False))

    assert updater.update_all() == []
    assert nix.update_calls == []
    assert feedback.infos == []


def test_update_all_stops_on_io_failure() -> None:
    """Failing to start nix is fatal, unlike a failed update."""
    nix = FakeNix(spawn_error=FileNotFoundError(2, "No such file or directory"))
    updater, _ = _updater(
        nix,
        Flake(name="a", path=Path("/a"), enabled=True),
        Flake(name="b", path=Path("/b"), enabled=True),
    )

    with pytest.raises(IoFailure):
        updater.update_all()

    assert nix.update_calls == [Path("/a")]


def test_update_one_enabled_flake() -> None:
    nix = FakeNix()
    updater, feedback = _updater(nix, Flake(name="a", path=Path("/a"), enabled=True))

    updater.update_one("a")

    assert nix.update_calls == [Path("/a")]
    assert feedback.infos == ['updating flake `a` at "/a"']


def test_update_one_disabled_flake_is_a_silent_no_op() -> None:
    nix = FakeNix()
    updater, feedback = _updater(nix, Flake(name="y", path=Path("/y"), enabled=False))

    updater.update_one("y")

    assert nix.update_calls == []
    assert nix.show_calls == []
    assert feedback.infos == []
    assert feedback.warnings == []
    assert feedback.errors == []


def test_update_one_unknown_flake() -> None:
    updater, _ = _updater(FakeNix())

    with pytest.raises(UnknownEntry) as exc_info:
        updater.update_one("ghost")

    assert exc_info.value.message == "no flake named `ghost`"


def test_update_one_failure_propagates() -> None:
    nix = FakeNix(update_results={Path("/a"): NixResult(returncode=1, stderr="error: nope")})
    updater, _ = _updater(nix, Flake(name="a", path=Path("/a"), enabled=True))

    with pytest.raises(ExternalToolFailure):
        updater.update_one("a")
