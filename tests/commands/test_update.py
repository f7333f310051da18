"""Tests for the update command."""

from pathlib import Path

from click.testing import CliRunner

from snowplow.cli.cli import cli
from snowplow.core.context import SnowPlowContext
from snowplow.core.nix.abc import NixResult
from snowplow.core.nix.fake import FakeNix
from snowplow.core.store import InMemoryRegistryStore
from snowplow.core.types import Flake
from tests.fakes.user_feedback import FakeUserFeedback

A = Flake(name="a", path=Path("/flakes/a"), enabled=True)
B = Flake(name="b", path=Path("/flakes/b"), enabled=True)
C = Flake(name="c", path=Path("/flakes/c"), enabled=True)
OFF = Flake(name="off", path=Path("/flakes/off"), enabled=False)


def test_update_all_success_prints_summary() -> None:
    nix = FakeNix()
    feedback = FakeUserFeedback()
    store = InMemoryRegistryStore([A, OFF, C])
    ctx = SnowPlowContext.for_test(nix=nix, store=store, feedback=feedback)

    result = CliRunner().invoke(cli, ["update"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert nix.update_calls == [A.path, C.path]
    assert feedback.infos == [
        'updating flake `a` at "/flakes/a" 1/2',
        'updating flake `c` at "/flakes/c" 2/2',
    ]
    assert "Update Complete" in result.output
    assert "Flakes: 2/2 updated" in result.output
    assert store.save_count == 1


def test_update_all_keeps_going_and_exits_non_zero() -> None:
    nix = FakeNix(update_results={B.path: NixResult(returncode=1, stderr="error: lock conflict\n")})
    feedback = FakeUserFeedback()
    store = InMemoryRegistryStore([A, B, C])
    ctx = SnowPlowContext.for_test(nix=nix, store=store, feedback=feedback)

    result = CliRunner().invoke(cli, ["update"], obj=ctx)

    assert result.exit_code == 1
    assert nix.update_calls == [A.path, B.path, C.path]
    assert feedback.errors == ["error: lock conflict"]
    assert "Update Failed" in result.output
    assert "Flakes: 2/3 updated" in result.output
    assert "b (/flakes/b):" in result.output
    assert store.save_count == 1


def test_update_all_with_nothing_enabled_prints_nothing() -> None:
    nix = FakeNix()
    ctx = SnowPlowContext.for_test(nix=nix, store=InMemoryRegistryStore([OFF]))

    result = CliRunner().invoke(cli, ["update"], obj=ctx)

    assert result.exit_code == 0
    assert result.output == ""
    assert nix.update_calls == []


def test_update_named_flake() -> None:
    nix = FakeNix()
    feedback = FakeUserFeedback()
    ctx = SnowPlowContext.for_test(nix=nix, store=InMemoryRegistryStore([A, C]), feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "c"], obj=ctx)

    assert result.exit_code == 0
    assert nix.update_calls == [C.path]
    assert feedback.infos == ['updating flake `c` at "/flakes/c"']
    assert "Update Complete" not in result.output


def test_update_named_disabled_flake_does_nothing() -> None:
    nix = FakeNix()
    feedback = FakeUserFeedback()
    ctx = SnowPlowContext.for_test(nix=nix, store=InMemoryRegistryStore([OFF]), feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "off"], obj=ctx)

    assert result.exit_code == 0
    assert nix.update_calls == []
    assert feedback.infos == []
    assert feedback.warnings == []
    assert feedback.errors == []


def test_update_named_unknown_flake() -> None:
    feedback = FakeUserFeedback()
    ctx = SnowPlowContext.for_test(store=InMemoryRegistryStore([A]), feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "ghost"], obj=ctx)

    assert result.exit_code == 1
    assert feedback.errors == ["no flake named `ghost`"]


def test_update_named_failure_is_fatal() -> None:
    nix = FakeNix(
        update_results={
            A.path: NixResult(returncode=1, stderr="warning: dirty tree\nerror: unreachable\n")
        }
    )
    feedback = FakeUserFeedback()
    store = InMemoryRegistryStore([A])
    ctx = SnowPlowContext.for_test(nix=nix, store=store, feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "a"], obj=ctx)

    assert result.exit_code == 1
    assert feedback.warnings == ["nix: warning: dirty tree"]
    assert feedback.errors == ["error: unreachable"]
    assert store.save_count == 0


def test_update_cannot_start_nix() -> None:
    nix = FakeNix(spawn_error=FileNotFoundError(2, "No such file or directory"))
    feedback = FakeUserFeedback()
    ctx = SnowPlowContext.for_test(nix=nix, store=InMemoryRegistryStore([A, B]), feedback=feedback)

    result = CliRunner().invoke(cli, ["update"], obj=ctx)

    assert result.exit_code == 2
    assert feedback.errors == ["shell: No such file or directory"]
