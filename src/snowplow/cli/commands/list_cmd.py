import click

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.cli.output import machine_output
from snowplow.cli.rendering import format_flake_line
from snowplow.core.commands import ListFilter, ListFlakes
from snowplow.core.context import SnowPlowContext


@click.command("list")
@click.option("-e", "--enabled", is_flag=True, help="Only list enabled flakes.")
@click.option("-d", "--disabled", is_flag=True, help="Only list disabled flakes.")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SnowPlowContext, enabled: bool, disabled: bool) -> None:
    """List tracked flakes with their path and status."""
    if enabled and disabled:
        raise click.UsageError("--enabled and --disabled are mutually exclusive")

    list_filter = ListFilter.ALL
    if enabled:
        list_filter = ListFilter.ENABLED
    elif disabled:
        list_filter = ListFilter.DISABLED

    outcome = run_command(ctx, ListFlakes(filter=list_filter))

    # The status column is redundant once filtered.
    show_status = list_filter is ListFilter.ALL
    for flake in outcome.flakes:
        machine_output(
            format_flake_line(flake, show_status=show_status, styled=ctx.style.stdout),
            color=ctx.style.stdout,
        )
