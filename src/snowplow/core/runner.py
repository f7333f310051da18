"""Runs nix against a single flake and interprets its diagnostics."""

import logging
from pathlib import Path

from snowplow.core.diagnostics import ErrorRecord, classify_stderr
from snowplow.core.errors import ExternalToolFailure
from snowplow.core.nix.abc import Nix, NixResult
from snowplow.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class Runner:
    """Blocking wrapper around nix that turns failures into ExternalToolFailure.

    Warnings found in stderr are reported through feedback as soon as the
    invocation finishes; error records are raised to the caller.
    """

    def __init__(self, nix: Nix, feedback: UserFeedback) -> None:
        self._nix = nix
        self._feedback = feedback

    def check(self, location: Path) -> None:
        """Validate that a usable flake exists at location.

        Raises:
            ExternalToolFailure: If `nix flake show` fails
            IoFailure: If nix cannot be started
        """
        self._handle(self._nix.flake_show(location))

    def run_update(self, location: Path) -> None:
        """Update the lock file of the flake at location.

        Raises:
            ExternalToolFailure: If `nix flake update` fails
            IoFailure: If nix cannot be started
        """
        self._handle(self._nix.flake_update(location))

    def _handle(self, result: NixResult) -> None:
        lines = result.stderr.splitlines()

        if result.success:
            for line in lines:
                if line.strip():
                    self._warn(line.strip())
            return

        diagnostics = classify_stderr(lines)
        for warning in diagnostics.warnings:
            self._warn(warning)

        records = diagnostics.errors
        if not records:
            records = [ErrorRecord(title=f"nix exited with status {result.returncode}")]
        logger.debug("nix failed with %d error record(s)", len(records))
        raise ExternalToolFailure(records)

    def _warn(self, line: str) -> None:
        self._feedback.warning(f"nix: {line}")
