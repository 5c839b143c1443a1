"""Helpers shared by the CLI commands."""

import click

from ..config import read_config
from ..discovery import list_directories
from ..errors import TsmError


class TsmClickError(click.ClickException):
    """ClickException printed verbatim on stdout, without the "Error: " prefix."""

    def show(self, file=None):
        click.echo(self.format_message(), file=file)


def raise_click_error(error):
    """Re-raise a tsm library error as a TsmClickError (exit code 1)."""
    raise TsmClickError(str(error)) from error


def get_config(obj):
    """Load the config once per invocation, creating the default file if absent."""
    if "config" not in obj:
        try:
            obj["config"] = read_config(obj["config_path"])
        except TsmError as e:
            raise_click_error(e)
    return obj["config"]


def candidate_directories(config):
    try:
        return list_directories(config)
    except TsmError as e:
        raise_click_error(e)
