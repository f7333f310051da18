"""Output utilities for CLI commands with clear intent.

- user_output: diagnostics for the user, routed to stderr
- machine_output: command results (listings, progress), routed to stdout

Styling is decided once per invocation from the --style option and carried
as an OutputStyle; nothing here inspects the terminal on its own.
"""

from dataclasses import dataclass

import click

STYLE_CHOICES = ("auto", "always", "never")


@dataclass(frozen=True)
class OutputStyle:
    """Whether ANSI styling is applied on each output stream."""

    stdout: bool
    stderr: bool


def resolve_output_style(choice: str) -> OutputStyle:
    """Turn a --style choice into per-stream styling decisions.

    `auto` styles a stream only when it is attached to a terminal.
    """
    match choice:
        case "always":
            return OutputStyle(stdout=True, stderr=True)
        case "never":
            return OutputStyle(stdout=False, stderr=False)
        case _:
            return OutputStyle(
                stdout=click.get_text_stream("stdout").isatty(),
                stderr=click.get_text_stream("stderr").isatty(),
            )


def user_output(message: str = "", *, color: bool = False) -> None:
    """Write a diagnostic line to stderr."""
    click.echo(message, err=True, color=color)


def machine_output(message: str = "", *, color: bool = False) -> None:
    """Write a result line to stdout."""
    click.echo(message, color=color)


def format_duration(seconds: float) -> str:
    """Format a duration as `42s` or `1m 23s`."""
    total = int(round(seconds))
    if total < 60:
        return f"{total}s"
    minutes, secs = divmod(total, 60)
    return f"{minutes}m {secs}s"
