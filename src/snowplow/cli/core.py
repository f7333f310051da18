"""Shared plumbing for CLI commands."""

from snowplow.core.commands import Command, CommandOutcome, execute
from snowplow.core.context import SnowPlowContext
from snowplow.core.errors import InternalInconsistency


def run_command(ctx: SnowPlowContext, command: Command) -> CommandOutcome:
    """Execute a command and check that the registry was persisted."""
    return ensure_persisted(execute(ctx, command))


def ensure_persisted(outcome: CommandOutcome) -> CommandOutcome:
    """Refuse an outcome whose registry changes were never saved.

    Raises:
        InternalInconsistency: If the outcome was produced without persisting
    """
    if not outcome.persisted:
        raise InternalInconsistency("unexpected exit before the registry was saved")
    return outcome
