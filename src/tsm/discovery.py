"""Candidate directory discovery.

Each configured base directory contributes its immediate subdirectories.
Paths ending with any of the ignore suffixes are dropped.
"""

import os

from .errors import DiscoveryError


def list_directories(config):
    """List the subdirectories of every base directory, minus ignored ones.

    Base directories are visited in configured order; the children of each
    are sorted by name. Listing stops at the first base directory that
    cannot be read.

    Args:
        config: Config dict with "base_dirs" and "ignore_dirs"

    Returns:
        List of directory paths (base directory joined with the child name).

    Raises:
        DiscoveryError: If a base directory is missing or unreadable.
    """
    paths = []
    for base_dir in config.get("base_dirs", []):
        base_dir = os.path.expanduser(base_dir)
        try:
            with os.scandir(base_dir) as entries:
                names = sorted(
                    entry.name
                    for entry in entries
                    if entry.is_dir(follow_symlinks=False)
                )
        except OSError as e:
            raise DiscoveryError(f"Could not list base directory {base_dir}: {e}")

        paths.extend(os.path.join(base_dir, name) for name in names)

    return remove_ignored_dirs(paths, config.get("ignore_dirs", []))


def is_ignored(path, ignore_dirs):
    """Plain suffix match: True if path ends with any of ignore_dirs."""
    return any(path.endswith(suffix) for suffix in ignore_dirs)


def remove_ignored_dirs(paths, ignore_dirs):
    return [path for path in paths if not is_ignored(path, ignore_dirs)]
