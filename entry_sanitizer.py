#!/usr/bin/env python3
"""
Entry sanitizer

Turns raw ENTRY arguments into absolute paths with `.` and `..` collapsed
against the current working directory. Nothing is resolved on disk: symlinks
are left alone and the paths do not need to exist.
"""

import logging
import os
import pathlib
from typing import Iterable, Optional

from auxiliary import display_path
from rment_errors import WorkingDirectoryError

logger = logging.getLogger(__name__)


def _current_directory() -> pathlib.Path:
    try:
        return pathlib.Path(os.getcwd())
    except OSError as e:
        raise WorkingDirectoryError(f"Failed to get current working directory. {e}") from e


def normalize_entry(entry: str, cwd: pathlib.Path) -> pathlib.Path:
    """Anchor a single entry on cwd and collapse dot segments lexically

    Falls back to the joined, unnormalized path if normalization fails.
    """
    joined = cwd / entry
    try:
        return pathlib.Path(os.path.normpath(joined))
    except (TypeError, ValueError):
        logger.debug("Could not normalize %s, using it as is", display_path(joined))
        return joined


def sanitize_entries(entries: Iterable[str], cwd: Optional[pathlib.Path] = None) -> list[pathlib.Path]:
    """Convert raw entries into normalized absolute paths

    Args:
        entries: Raw path strings, relative or absolute
        cwd: Directory to anchor relative entries on (defaults to the process cwd)

    Returns:
        One path per entry, in input order, duplicates included

    Raises:
        WorkingDirectoryError: if cwd is not given and cannot be read
    """
    logger.debug("Sanitizing ENTRY values...")
    if cwd is None:
        cwd = _current_directory()
    logger.debug("cwd: %s", display_path(cwd))

    paths = []
    for entry in entries:
        path = normalize_entry(entry, cwd)
        logger.debug("path: %s", display_path(path))
        paths.append(path)
    return paths
