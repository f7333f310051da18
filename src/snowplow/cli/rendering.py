"""Rendering of flakes and batch results for terminal output."""

import click
from rich.panel import Panel
from rich.text import Text

from snowplow.cli.output import format_duration
from snowplow.core.types import Flake, FlakeFailure


def format_flake_line(flake: Flake, *, show_status: bool, styled: bool) -> str:
    """Format one flake as `name path [enabled|disabled]`, with a bold name if styled."""
    name = click.style(flake.name, bold=True) if styled else flake.name
    line = f"{name} {flake.path}"
    if show_status:
        line += " enabled" if flake.enabled else " disabled"
    return line


def format_update_summary(
    failures: list[FlakeFailure], total: int, total_duration: float
) -> Panel:
    """Format the final summary box of a batch update.

    Args:
        failures: Flakes that failed, in update order
        total: Number of enabled flakes the batch went through
        total_duration: Total execution time in seconds

    Returns:
        Rich Panel with status, counts, timing and the first error of each failure
    """
    overall_success = not failures

    lines: list[Text] = []
    if overall_success:
        lines.append(Text("Status: Success", style="green"))
    else:
        lines.append(Text("Status: Failed", style="red"))

    lines.append(Text(f"Flakes: {total - len(failures)}/{total} updated"))
    lines.append(Text(f"Duration: {format_duration(total_duration)}"))

    for failure in failures:
        lines.append(Text(""))
        lines.append(Text(f"{failure.name} ({failure.path}):", style="red bold"))
        if failure.records:
            lines.append(Text(failure.records[0].title, style="red"))

    content = Text("\n").join(lines)
    title = "Update Complete" if overall_success else "Update Failed"
    return Panel(
        content, title=title, border_style="green" if overall_success else "red", padding=(1, 2)
    )
