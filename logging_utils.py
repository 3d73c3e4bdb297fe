"""Logging setup for rment."""

import logging
import pathlib
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from rment_errors import LogSetupError

LOG_FORMAT = "[%(name)s][%(levelname)s] %(message)s"


def _shown_on_console(record: logging.LogRecord) -> bool:
    return getattr(record, "console", True)


def configure_logging(
    log_file: pathlib.Path, level: str = "INFO", verbose: bool = False, console: Optional[Console] = None
) -> logging.Logger:
    """Configure process-wide file logging, plus Rich console logging when verbose."""

    file_level = logging.getLevelName(level.upper())
    if not isinstance(file_level, int):
        file_level = logging.INFO

    try:
        file_handler = logging.FileHandler(log_file, encoding="utf-8", errors="backslashreplace")
    except OSError as e:
        raise LogSetupError(f"An error occured while opening the log file. {e}") from e
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(file_level)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    root_logger.addHandler(file_handler)
    root_level = file_level

    if verbose:
        rich_handler = RichHandler(console=console, show_path=False, markup=False)
        rich_handler.setLevel(logging.DEBUG)
        rich_handler.addFilter(_shown_on_console)
        root_logger.addHandler(rich_handler)
        root_level = logging.DEBUG

    root_logger.setLevel(root_level)
    return logging.getLogger("rment")
