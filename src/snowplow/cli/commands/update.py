import time

import click
from rich.console import Console

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.cli.rendering import format_update_summary
from snowplow.core.commands import Update
from snowplow.core.context import SnowPlowContext


@click.command("update")
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def update_cmd(ctx: SnowPlowContext, name: str | None) -> None:
    """Update the flake NAME, or every enabled flake when no name is given.

    A named flake that is disabled is left alone. When updating every flake,
    a failure is reported and the remaining flakes are still updated; the
    command then exits with status 1.
    """
    if name is not None:
        run_command(ctx, Update(name=name))
        return

    start_time = time.time()
    outcome = run_command(ctx, Update())
    duration = time.time() - start_time

    if outcome.attempted == 0:
        return

    console = Console(
        file=click.get_text_stream("stdout"),
        force_terminal=ctx.style.stdout,
        no_color=not ctx.style.stdout,
    )
    console.print(format_update_summary(list(outcome.failures), outcome.attempted, duration))

    if outcome.failures:
        raise SystemExit(1)
