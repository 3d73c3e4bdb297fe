#!/usr/bin/env python3
"""
Auxiliary display helpers for rment

Shortens paths for the progress bar and the console report.
"""

import os
import pathlib
from typing import Optional


def display_path(path) -> str:
    """Render a path as text, replacing bytes that are not valid UTF-8"""
    return os.fsencode(path).decode("utf-8", "replace")


def format_path_for_display(path: str, home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with a leading home directory replaced by ~
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    home = home_path.rstrip("/")
    if home and (path == home or path.startswith(home + "/")):
        return "~" + path[len(home) :]
    return path


def truncate_label(label: str, max_length: int = 40) -> str:
    """Truncate long progress labels with ... in the middle"""
    if len(label) <= max_length:
        return label

    available = max_length - 3
    start_len = available // 2
    end_len = available - start_len

    return f"{label[:start_len]}...{label[-end_len:]}"
