"""Batch and single-flake updates."""

import logging

from snowplow.core.errors import ExternalToolFailure, UnknownEntry
from snowplow.core.registry import FlakeRegistry
from snowplow.core.runner import Runner
from snowplow.core.types import FlakeFailure
from snowplow.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class BatchUpdater:
    """Runs `nix flake update` over registry entries, one at a time."""

    def __init__(self, registry: FlakeRegistry, runner: Runner, feedback: UserFeedback) -> None:
        self._registry = registry
        self._runner = runner
        self._feedback = feedback

    def update_one(self, name: str) -> None:
        """Update a single flake by name.

        Naming a disabled flake is a silent no-op.

        Raises:
            UnknownEntry: If no flake has this name
            ExternalToolFailure: If the update fails
        """
        flake = self._registry.find(name)
        if flake is None:
            raise UnknownEntry(name)
        if not flake.enabled:
            logger.debug("Skipping disabled flake %s", name)
            return

        self._feedback.info(f'updating flake `{flake.name}` at "{flake.path}"')
        self._runner.run_update(flake.path)

    def update_all(self) -> list[FlakeFailure]:
        """Update every enabled flake.

        A failing flake is reported and recorded, then the next one is
        updated anyway.

        Returns:
            Failures in update order; empty when every flake was updated
        """
        enabled = [flake for flake in self._registry if flake.enabled]
        failures: list[FlakeFailure] = []

        for position, flake in enumerate(enabled, start=1):
            self._feedback.info(
                f'updating flake `{flake.name}` at "{flake.path}" {position}/{len(enabled)}'
            )
            try:
                self._runner.run_update(flake.path)
            except ExternalToolFailure as e:
                for message in e.messages():
                    self._feedback.error(message)
                failures.append(
                    FlakeFailure(name=flake.name, path=flake.path, records=tuple(e.records))
                )

        logger.debug("Updated %d flake(s), %d failure(s)", len(enabled), len(failures))
        return failures
