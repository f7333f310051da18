import click

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.core.commands import Disable, Enable
from snowplow.core.context import SnowPlowContext


@click.command("enable")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def enable_cmd(ctx: SnowPlowContext, name: str) -> None:
    """Enable a previously disabled flake, so it is updated again."""
    run_command(ctx, Enable(name=name))


@click.command("disable")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def disable_cmd(ctx: SnowPlowContext, name: str) -> None:
    """Disable a flake, so `snow-plow update` skips it."""
    run_command(ctx, Disable(name=name))
