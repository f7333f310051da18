"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

import click

from snowplow.cli.output import OutputStyle, resolve_output_style
from snowplow.core.nix.abc import Nix
from snowplow.core.nix.real import RealNix
from snowplow.core.store import FilesystemRegistryStore, RegistryStore
from snowplow.core.user_feedback import InteractiveFeedback, UserFeedback

APP_NAME = "snow-plow"


@dataclass(frozen=True)
class SnowPlowContext:
    """Immutable context holding all dependencies for snow-plow operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Note: store is None when no config directory was given and no default
    could be found. Only commands touching the registry need it.
    """

    nix: Nix
    store: RegistryStore | None
    feedback: UserFeedback
    style: OutputStyle

    @staticmethod
    def for_test(
        nix: Nix | None = None,
        store: RegistryStore | None = None,
        feedback: UserFeedback | None = None,
        style: OutputStyle | None = None,
    ) -> "SnowPlowContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            nix: Optional Nix implementation. If None, creates empty FakeNix.
            store: Optional RegistryStore. If None, creates empty InMemoryRegistryStore.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            style: Optional OutputStyle. If None, disables styling on both streams.

        Example:
            >>> nix = FakeNix(update_results={Path("/flakes/a"): NixResult(1, "error: x")})
            >>> ctx = SnowPlowContext.for_test(nix=nix)
        """
        from tests.fakes.user_feedback import FakeUserFeedback

        from snowplow.core.nix.fake import FakeNix
        from snowplow.core.store import InMemoryRegistryStore

        return SnowPlowContext(
            nix=nix if nix is not None else FakeNix(),
            store=store if store is not None else InMemoryRegistryStore(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            style=style if style is not None else OutputStyle(stdout=False, stderr=False),
        )


def default_config_dir() -> Path | None:
    """Get the platform config directory for snow-plow.

    Follows $XDG_CONFIG_HOME, falling back to ~/.config. Returns None when
    neither yields an absolute path (e.g. no resolvable home directory).
    """
    app_dir = Path(click.get_app_dir(APP_NAME))
    if not app_dir.is_absolute():
        return None
    return app_dir


def create_context(*, config_dir: Path | None, style_choice: str) -> SnowPlowContext:
    """Create production context with real implementations.

    Args:
        config_dir: Directory given with --config or SNOW_PLOW_CONFIG, if any
        style_choice: Value of --style (auto, always or never)
    """
    if config_dir is None:
        config_dir = default_config_dir()

    style = resolve_output_style(style_choice)
    store = FilesystemRegistryStore(config_dir) if config_dir is not None else None

    return SnowPlowContext(
        nix=RealNix(os.environ.get("SNOW_PLOW_NIX", "nix")),
        store=store,
        feedback=InteractiveFeedback(style),
        style=style,
    )
