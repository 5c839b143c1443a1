"""Session switching commands."""

import os
from pathlib import Path

import click

from ..errors import TsmError
from ..selector import select_directory, select_directory_builtin
from ..tmux import ZERO_SESSION_ID, ensure_session, session_id_for_path
from .utils import candidate_directories, get_config, raise_click_error


def open_session(runner, session_id, target_dir):
    """Create (if needed) and switch to a session, reporting tmux failures."""
    try:
        ensure_session(session_id, target_dir, runner, environ=os.environ)
    except TsmError as e:
        raise_click_error(e)


@click.command("switch")
@click.option(
    "--picker",
    type=click.Choice(["fzf", "builtin"]),
    default="fzf",
    help="Directory picker: fzf (default) or a builtin menu that needs no fzf.",
)
@click.pass_obj
def switch_cmd(obj, picker):
    """Pick a project directory and switch to its session.

    Lists the subdirectories of every configured base directory, lets you
    choose one, then creates a tmux session named after it (if it does not
    exist yet) and attaches to it, or switches to it when run inside tmux.
    """
    runner = obj["runner"]
    paths = candidate_directories(get_config(obj))

    if picker == "builtin":
        target_dir = select_directory_builtin(paths)
    else:
        target_dir = select_directory(paths, runner)

    if target_dir is None:
        # Cancelled selection is not an error
        return

    open_session(runner, session_id_for_path(target_dir), target_dir)


@click.command("0")
@click.pass_obj
def zero_cmd(obj):
    """Switch to the zero session.

    The zero session is named "0" and starts in your home directory.
    """
    get_config(obj)
    open_session(obj["runner"], ZERO_SESSION_ID, Path.home())
