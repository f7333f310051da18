from pathlib import Path

import click
from click.shell_completion import get_completion_class

from snowplow.cli.error_boundary import cli_error_boundary
from snowplow.core.context import SnowPlowContext
from snowplow.core.errors import IoFailure

PROG_NAME = "snow-plow"
COMPLETE_VAR = "_SNOW_PLOW_COMPLETE"

# File names the shells look for in their completion directories.
COMPLETION_FILES = {
    "bash": f"{PROG_NAME}.bash",
    "zsh": f"_{PROG_NAME}",
    "fish": f"{PROG_NAME}.fish",
}


def generate_completion_script(cli: click.Command, shell: str) -> str:
    """Generate the completion script of a shell through click's completion system."""
    completion_class = get_completion_class(shell)
    if completion_class is None:
        raise click.BadParameter(f"unsupported shell: {shell}")
    return completion_class(cli, {}, PROG_NAME, COMPLETE_VAR).source()


@click.command("gen-completion")
@click.argument("shell", type=click.Choice(sorted(COMPLETION_FILES)))
@click.pass_obj
@cli_error_boundary
def gen_completion_cmd(ctx: SnowPlowContext, shell: str) -> None:
    """Generate the completion script for SHELL in the current directory."""
    root = click.get_current_context().find_root().command
    script = generate_completion_script(root, shell)

    out_path = Path.cwd() / COMPLETION_FILES[shell]
    try:
        out_path.write_text(script, encoding="utf-8")
    except OSError as e:
        raise IoFailure(str(out_path), e) from e

    ctx.feedback.info(f"wrote {out_path}")
