"""tmux session control.

Session names are derived from the selected directory's basename and
sanitized so tmux accepts them (tmux treats "." and ":" as target
separators).
"""

import os
import re

from .runner import INHERIT, QUIET

TMUX = "tmux"
# Marker set by tmux inside every client session
TMUX_ENV_VAR = "TMUX"
ZERO_SESSION_ID = "0"

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def clean_id(name):
    """Replace every character outside [A-Za-z0-9_-] with an underscore."""
    return _DISALLOWED_CHARS.sub("_", name)


def session_id_for_path(path):
    """Session name for a project directory: its sanitized basename."""
    return clean_id(os.path.basename(str(path).rstrip(os.sep)))


def session_exists(session_id, runner):
    """True if tmux reports the session. Any failure counts as missing."""
    try:
        result = runner.run([TMUX, "has-session", "-t", session_id], io=QUIET)
    except OSError:
        return False
    return result.returncode == 0


def create_session(session_id, target_dir, runner):
    """Start a detached session rooted at target_dir."""
    runner.check(
        [TMUX, "new-session", "-d", "-s", session_id, "-c", str(target_dir)],
        io=QUIET,
    )


def inside_tmux(environ=None):
    environ = os.environ if environ is None else environ
    return TMUX_ENV_VAR in environ


def switch_to_session(session_id, runner, environ=None):
    """Switch the current client if already inside tmux, otherwise attach.

    Raises CommandError if tmux fails.
    """
    if inside_tmux(environ):
        command = [TMUX, "switch-client", "-t", session_id]
    else:
        command = [TMUX, "attach", "-t", session_id]
    runner.check(command, io=INHERIT)


def ensure_session(session_id, target_dir, runner, environ=None):
    """Create the session if it does not exist yet, then switch or attach to it.

    Args:
        session_id: Sanitized session name
        target_dir: Working directory for a newly created session
        runner: ProcessRunner used for every tmux call
        environ: Environment mapping to check for TMUX (defaults to os.environ)

    Returns:
        True if a new session was created, False if an existing one was reused.
    """
    created = False
    if not session_exists(session_id, runner):
        create_session(session_id, target_dir, runner)
        created = True

    switch_to_session(session_id, runner, environ=environ)
    return created
