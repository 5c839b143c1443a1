"""CLI commands for tsm (the tmux session manager)."""

import click
from click_default_group import DefaultGroup

from ..config import get_config_path
from ..runner import ProcessRunner
from .listing import config_cmd, list_cmd
from .switch import switch_cmd, zero_cmd


@click.group(
    cls=DefaultGroup,
    default="switch",
    default_if_no_args=True,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(None, "-v", "--version", package_name="tsm")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="TSM_CONFIG",
    help="Config file to use (default: config.json in the user config dir).",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Print each tmux/fzf command before running it.",
)
@click.pass_context
def cli(ctx, config_path, verbose):
    """tsm - The Tmux Session Manager

    tsm manages your tmux sessions by creating a new session per project
    directory. Sessions may contain multiple windows which are isolated and
    maintained when switching between projects. Omitting any commands will
    trigger the session switcher.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or get_config_path()
    # A runner passed in via obj takes precedence
    ctx.obj.setdefault("runner", ProcessRunner(verbose=verbose))

    # Only group options given, e.g. `tsm --verbose`
    if ctx.invoked_subcommand is None:
        ctx.invoke(switch_cmd)


# Register commands
cli.add_command(switch_cmd, "switch")
cli.add_command(zero_cmd, "0")
cli.add_command(list_cmd, "list")
cli.add_command(config_cmd, "config")


def main():
    cli()


__all__ = [
    "cli",
    "main",
    "switch_cmd",
    "zero_cmd",
    "list_cmd",
    "config_cmd",
]
