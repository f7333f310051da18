import click

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.cli.output import machine_output
from snowplow.cli.rendering import format_flake_line
from snowplow.core.commands import Info
from snowplow.core.context import SnowPlowContext


@click.command("info")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def info_cmd(ctx: SnowPlowContext, name: str) -> None:
    """Show the path and status of a flake."""
    outcome = run_command(ctx, Info(name=name))
    for flake in outcome.flakes:
        machine_output(
            format_flake_line(flake, show_status=True, styled=ctx.style.stdout),
            color=ctx.style.stdout,
        )
