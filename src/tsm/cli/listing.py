"""Non-interactive commands for checking what tsm sees."""

import json

import click

from .utils import candidate_directories, get_config


@click.command("list")
@click.pass_obj
def list_cmd(obj):
    """Print the candidate project directories, one per line."""
    for path in candidate_directories(get_config(obj)):
        click.echo(path)


@click.command("config")
@click.option(
    "--show",
    is_flag=True,
    help="Print the config contents instead of its path.",
)
@click.pass_obj
def config_cmd(obj, show):
    """Print the location of the config file.

    The file is created with empty base_dirs and ignore_dirs on first use.
    """
    config = get_config(obj)
    if show:
        click.echo(json.dumps(config, indent=2))
    else:
        click.echo(str(obj["config_path"]))
