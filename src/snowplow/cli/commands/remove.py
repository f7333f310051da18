import click

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.core.commands import Remove
from snowplow.core.context import SnowPlowContext


@click.command("remove")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: SnowPlowContext, name: str) -> None:
    """Stop tracking a flake. The flake itself is left untouched."""
    run_command(ctx, Remove(name=name))
