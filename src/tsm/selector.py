"""Interactive directory selection.

The default picker pipes candidates through fzf. A questionary-based
picker is available for machines without fzf.
"""

import os

import questionary

from .runner import INHERIT

FZF_COMMAND = ["fzf"]


def select_directory(paths, runner, command=None):
    """Let the user pick one of paths with fzf.

    fzf draws on the terminal via stderr/tty, so only stdout is captured.
    A non-zero exit (Esc, Ctrl-C, no match), a missing fzf binary and empty
    output all count as "nothing selected".

    Args:
        paths: Candidate directory paths
        runner: ProcessRunner used to spawn fzf
        command: Override the selector command (defaults to ["fzf"])

    Returns:
        The chosen path, or None if nothing was selected.
    """
    command = command or FZF_COMMAND
    try:
        result = runner.run(command, io=INHERIT, input="\n".join(paths), capture=True)
    except OSError:
        return None

    if result.returncode != 0:
        return None

    selected = (result.stdout or "").strip()
    return selected or None


def build_directory_choices(paths):
    """Build questionary choices grouped under a separator per parent directory.

    Args:
        paths: Candidate directory paths, already in display order

    Returns:
        List of questionary.Choice and questionary.Separator objects.
    """
    choices = []
    current_parent = None
    for path in paths:
        parent, name = os.path.split(path.rstrip(os.sep))
        if parent != current_parent:
            choices.append(questionary.Separator(f"--- {parent} ---"))
            current_parent = parent
        choices.append(questionary.Choice(title=name, value=path))
    return choices


def select_directory_builtin(paths):
    """Same contract as select_directory, using a questionary prompt."""
    if not paths:
        return None

    selected = questionary.select(
        "Select a project directory:",
        choices=build_directory_choices(paths),
    ).ask()

    # ask() returns None when the user cancels
    return selected or None
