"""Production nix implementation using subprocess."""

from pathlib import Path

from snowplow.core.nix.abc import Nix, NixResult
from snowplow.core.subprocess_utils import run_subprocess_with_context


class RealNix(Nix):
    """Runs the nix executable found on PATH (or the one given explicitly)."""

    def __init__(self, executable: str = "nix") -> None:
        self._executable = executable

    def flake_show(self, path: Path) -> NixResult:
        return self._run(["flake", "show", str(path)], f"show flake at {path}")

    def flake_update(self, path: Path) -> NixResult:
        # Since nix 2.19 positional arguments name inputs, not the flake.
        return self._run(["flake", "update", "--flake", str(path)], f"update flake at {path}")

    def _run(self, args: list[str], operation_context: str) -> NixResult:
        result = run_subprocess_with_context([self._executable, *args], operation_context)
        return NixResult(returncode=result.returncode, stderr=result.stderr)
