from pathlib import Path

import click

from snowplow.cli.core import run_command
from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.core.commands import Add
from snowplow.core.context import SnowPlowContext


@click.command("add")
@click.argument("name")
@click.argument("path", type=click.Path(file_okay=False, path_type=Path))
@click.pass_obj
@cli_error_boundary
def add_cmd(ctx: SnowPlowContext, name: str, path: Path) -> None:
    """Track the flake at PATH under NAME.

    PATH must contain a flake that `nix flake show` accepts. It need not be
    canonical, but it is stored as an absolute path. Although it is
    discouraged, several names may point to the same flake.
    """
    run_command(ctx, Add(name=name, path=path))
