import logging
import os
from pathlib import Path

import click

from snowplow.cli.commands.add import add_cmd
from snowplow.cli.commands.completion import gen_completion_cmd
from snowplow.cli.commands.info import info_cmd
from snowplow.cli.commands.list_cmd import list_cmd
from snowplow.cli.commands.remove import remove_cmd
from snowplow.cli.commands.toggle import disable_cmd, enable_cmd
from snowplow.cli.commands.update import update_cmd
from snowplow.cli.output import STYLE_CHOICES
from snowplow.core.context import create_context

logger = logging.getLogger(__name__)

# Enable debug logging if SNOW_PLOW_DEBUG environment variable is set
if os.getenv("SNOW_PLOW_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="snow-plow")
@click.option(
    "-c",
    "--config",
    "config_dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SNOW_PLOW_CONFIG",
    help=(
        "Directory where tracked flakes are saved. Defaults to "
        "$XDG_CONFIG_HOME/snow-plow or ~/.config/snow-plow. "
        "Must come before the command name."
    ),
)
@click.option(
    "-s",
    "--style",
    type=click.Choice(STYLE_CHOICES),
    default="auto",
    show_default=True,
    help=(
        "When to format the output with ANSI escape codes. "
        "Must come before the command name."
    ),
)
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, style: str) -> None:
    """Update all tracked nix flakes of your machine in one go.

    Global options go before the command, as in `snow-plow -c DIR list`.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config_dir=config_dir, style_choice=style)
    logger.debug("Config directory: %s", config_dir)


cli.add_command(add_cmd)
cli.add_command(enable_cmd)
cli.add_command(disable_cmd)
cli.add_command(remove_cmd)
cli.add_command(update_cmd)
cli.add_command(list_cmd)
cli.add_command(info_cmd)
cli.add_command(gen_completion_cmd)


def main() -> None:
    """CLI entry point used by the `snow-plow` console script."""
    cli(prog_name="snow-plow")
