"""Process spawning for tmux and fzf.

Every external program goes through a ProcessRunner so the CLI can be
exercised in tests with a fake runner instead of real binaries.
"""

import shlex
import subprocess
from collections import namedtuple

import click

from .errors import CommandError


IOContext = namedtuple("IOContext", ["stdin", "stdout", "stderr"])

# Use the invoking terminal (None lets the child inherit our streams)
INHERIT = IOContext(stdin=None, stdout=None, stderr=None)
QUIET = IOContext(
    stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
)


def format_command(command):
    """Render a command list as a copy-pasteable shell string."""
    return shlex.join(str(part) for part in command)


class ProcessRunner:
    """Runs external programs synchronously.

    Args:
        verbose: Echo each command to stderr before running it.
    """

    def __init__(self, verbose=False):
        self.verbose = verbose

    def run(self, command, io=INHERIT, input=None, capture=False):
        """Run a command and return the CompletedProcess.

        Non-zero exit codes are returned, not raised. FileNotFoundError
        propagates when the program is not installed.

        Args:
            command: Program and arguments, e.g. ["tmux", "attach", "-t", "x"]
            io: IOContext describing stream wiring
            input: Optional text fed to stdin (overrides io.stdin)
            capture: Capture stdout as text (overrides io.stdout)
        """
        command = [str(part) for part in command]
        if not command:
            raise ValueError("tsm: empty command provided")

        if self.verbose:
            click.echo(f"+ {format_command(command)}", err=True)

        kwargs = {"stdin": io.stdin, "stdout": io.stdout, "stderr": io.stderr}
        if input is not None:
            kwargs.pop("stdin")
            kwargs["input"] = input
        if capture:
            kwargs["stdout"] = subprocess.PIPE

        return subprocess.run(command, text=True, **kwargs)

    def check(self, command, io=INHERIT):
        """Run a command, raising CommandError if it does not succeed."""
        try:
            result = self.run(command, io=io)
        except FileNotFoundError:
            raise CommandError(
                f"{command[0]} not found. Is it installed and on your PATH?",
                command=list(command),
            )
        except OSError as e:
            raise CommandError(
                f"Failed to run {format_command(command)}: {e}", command=list(command)
            )

        if result.returncode != 0:
            raise CommandError(
                f"Command failed (exit status {result.returncode}): "
                f"{format_command(command)}",
                command=list(command),
                returncode=result.returncode,
            )
        return result
