"""User-facing diagnostic output with style awareness."""

from abc import ABC, abstractmethod

import click

from snowplow.cli.output import OutputStyle, machine_output, user_output

PROGRAM_NAME = "snow-plow"


class UserFeedback(ABC):
    """Reports progress, warnings and errors to the user.

    Core operations call ctx.feedback instead of printing, so tests can
    assert on what was reported and styling stays a CLI decision.

    Output format:
        info()    -> stdout, as-is
        warning() -> stderr, `snow-plow: warning: <message>`
        error()   -> stderr, `snow-plow: error: <message>`
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show a progress or informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a non-fatal anomaly. Execution continues."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show an error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the terminal, styled according to OutputStyle."""

    def __init__(self, style: OutputStyle) -> None:
        self._style = style

    def info(self, message: str) -> None:
        machine_output(message, color=self._style.stdout)

    def warning(self, message: str) -> None:
        self._log("warning", "yellow", message)

    def error(self, message: str) -> None:
        self._log("error", "red", message)

    def _log(self, level: str, color: str, message: str) -> None:
        if self._style.stderr:
            level = click.style(level, fg=color, bold=True)
        user_output(f"{PROGRAM_NAME}: {level}: {message}", color=self._style.stderr)
