"""Exceptions raised by tsm.

The library raises these; the CLI turns them into click errors.
"""


class TsmError(Exception):
    """Base class for every tsm failure."""

    pass


class ConfigError(TsmError):
    """Raised when the config file cannot be read, parsed or written."""

    pass


class DiscoveryError(TsmError):
    """Raised when a base directory cannot be listed."""

    pass


class CommandError(TsmError):
    """Raised when an external program fails or cannot be started."""

    def __init__(self, message, command=None, returncode=None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
