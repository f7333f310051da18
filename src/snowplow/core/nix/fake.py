"""Fake nix implementation for testing.

FakeNix is an in-memory implementation that records invocations and returns
pre-configured results without running any subprocess.
"""

from pathlib import Path

from snowplow.core.errors import IoFailure
from snowplow.core.nix.abc import Nix, NixResult

SUCCESS = NixResult(returncode=0, stderr="")


class FakeNix(Nix):
    """In-memory fake implementation of nix operations.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution. Paths without a configured result succeed
    with an empty stderr.

    Examples:
        >>> broken = Path("/flakes/broken")
        >>> nix = FakeNix(update_results={broken: NixResult(1, "error: boom\\n")})
        >>> nix.flake_update(broken).returncode
        1
        >>> nix.update_calls
        [PosixPath('/flakes/broken')]
    """

    def __init__(
        self,
        *,
        show_results: dict[Path, NixResult] | None = None,
        update_results: dict[Path, NixResult] | None = None,
        spawn_error: OSError | None = None,
    ) -> None:
        """Create FakeNix with predetermined results.

        Args:
            show_results: Result of `flake show` per flake path
            update_results: Result of `flake update` per flake path
            spawn_error: If set, every call fails as if nix could not be started
        """
        self._show_results = show_results or {}
        self._update_results = update_results or {}
        self._spawn_error = spawn_error
        self._show_calls: list[Path] = []
        self._update_calls: list[Path] = []

    @property
    def show_calls(self) -> list[Path]:
        """Paths passed to flake_show(), in call order.

        This property is for test assertions only.
        """
        return self._show_calls.copy()

    @property
    def update_calls(self) -> list[Path]:
        """Paths passed to flake_update(), in call order.

        This property is for test assertions only.
        """
        return self._update_calls.copy()

    def flake_show(self, path: Path) -> NixResult:
        self._show_calls.append(path)
        self._raise_spawn_error()
        return self._show_results.get(path, SUCCESS)

    def flake_update(self, path: Path) -> NixResult:
        self._update_calls.append(path)
        self._raise_spawn_error()
        return self._update_results.get(path, SUCCESS)

    def _raise_spawn_error(self) -> None:
        if self._spawn_error is not None:
            raise IoFailure("shell", self._spawn_error)
