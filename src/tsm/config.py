"""Config file handling.

The config lives in the per-user config directory and looks like:

    {"base_dirs": ["~/code", "~/work"], "ignore_dirs": [".git", "node_modules"]}

A missing file is created with empty lists on first use.
"""

import json
from pathlib import Path

import click

from .errors import ConfigError

APP_NAME = "tsm"
CONFIG_FILENAME = "config.json"
CONFIG_KEYS = ("base_dirs", "ignore_dirs")


def get_config_path():
    """Return the default config path, e.g. ~/.config/tsm/config.json on Linux."""
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILENAME


def default_config():
    return {key: [] for key in CONFIG_KEYS}


def validate_config(config, config_path=None):
    """Check the decoded JSON and fill in missing keys.

    Returns the config dict with both keys present.
    Raises ConfigError if the shape is wrong.
    """
    where = f" in {config_path}" if config_path else ""
    if not isinstance(config, dict):
        raise ConfigError(f"Config must be a JSON object{where}")

    for key in CONFIG_KEYS:
        value = config.get(key)
        if value is None:
            config[key] = []
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{key}' must be a list of strings{where}")

    return config


def read_config(config_path):
    """Load the config, creating a default one if the file does not exist.

    Args:
        config_path: Path to config.json

    Returns:
        Dict with "base_dirs" and "ignore_dirs" lists.

    Raises:
        ConfigError: If the file cannot be read or is not valid config JSON.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        config = default_config()
        write_config(config_path, config)
        return config

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Could not read config {config_path}: {e}")

    return validate_config(config, config_path)


def write_config(config_path, config):
    """Write config as JSON, creating the parent directory if needed."""
    config_path = Path(config_path)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f)
    except OSError as e:
        raise ConfigError(f"Could not write config {config_path}: {e}")
