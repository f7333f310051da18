"""Tests for the SnowPlowContext."""

from pathlib import Path

import pytest

from snowplow.cli.output import OutputStyle
from snowplow.core.context import SnowPlowContext, create_context, default_config_dir
from snowplow.core.nix.fake import FakeNix
from snowplow.core.nix.real import RealNix
from snowplow.core.store import FilesystemRegistryStore, InMemoryRegistryStore
from snowplow.core.user_feedback import InteractiveFeedback
from tests.fakes.user_feedback import FakeUserFeedback


def test_for_test_wires_given_dependencies() -> None:
    nix = FakeNix()
    store = InMemoryRegistryStore([])
    feedback = FakeUserFeedback()
    style = OutputStyle(stdout=True, stderr=False)

    ctx = SnowPlowContext.for_test(nix=nix, store=store, feedback=feedback, style=style)

    assert ctx.nix is nix
    assert ctx.store is store
    assert ctx.feedback is feedback
    assert ctx.style == style


def test_for_test_defaults_to_fakes() -> None:
    ctx = SnowPlowContext.for_test()

    assert isinstance(ctx.nix, FakeNix)
    assert isinstance(ctx.store, InMemoryRegistryStore)
    assert isinstance(ctx.feedback, FakeUserFeedback)
    assert ctx.style == OutputStyle(stdout=False, stderr=False)


def test_context_is_frozen() -> None:
    ctx = SnowPlowContext.for_test()

    with pytest.raises(AttributeError):
        ctx.store = None  # type: ignore[misc]


def test_default_config_dir_follows_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_config_dir() == tmp_path / "snow-plow"


def test_default_config_dir_rejects_relative_location(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/config")

    assert default_config_dir() is None


def test_create_context_uses_real_implementations(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("SNOW_PLOW_NIX", raising=False)

    ctx = create_context(config_dir=tmp_path, style_choice="never")

    assert isinstance(ctx.nix, RealNix)
    assert isinstance(ctx.store, FilesystemRegistryStore)
    assert ctx.store.path() == tmp_path / "config.csv"
    assert isinstance(ctx.feedback, InteractiveFeedback)
    assert ctx.style == OutputStyle(stdout=False, stderr=False)


def test_create_context_without_any_location(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/config")

    ctx = create_context(config_dir=None, style_choice="always")

    assert ctx.store is None
    assert ctx.style == OutputStyle(stdout=True, stderr=True)
