"""Attach or switch to a tmux session per project directory, picked with fzf."""

from .config import (
    APP_NAME,
    default_config,
    get_config_path,
    read_config,
    validate_config,
    write_config,
)
from .discovery import is_ignored, list_directories, remove_ignored_dirs
from .errors import CommandError, ConfigError, DiscoveryError, TsmError
from .runner import INHERIT, QUIET, IOContext, ProcessRunner, format_command
from .selector import (
    build_directory_choices,
    select_directory,
    select_directory_builtin,
)
from .tmux import (
    ZERO_SESSION_ID,
    clean_id,
    create_session,
    ensure_session,
    inside_tmux,
    session_exists,
    session_id_for_path,
    switch_to_session,
)
from .cli import cli, main

__all__ = [
    # Config
    "APP_NAME",
    "default_config",
    "get_config_path",
    "read_config",
    "validate_config",
    "write_config",
    # Discovery
    "is_ignored",
    "list_directories",
    "remove_ignored_dirs",
    # Errors
    "CommandError",
    "ConfigError",
    "DiscoveryError",
    "TsmError",
    # Process spawning
    "INHERIT",
    "QUIET",
    "IOContext",
    "ProcessRunner",
    "format_command",
    # Selection
    "build_directory_choices",
    "select_directory",
    "select_directory_builtin",
    # tmux
    "ZERO_SESSION_ID",
    "clean_id",
    "create_session",
    "ensure_session",
    "inside_tmux",
    "session_exists",
    "session_id_for_path",
    "switch_to_session",
    # CLI
    "cli",
    "main",
]
