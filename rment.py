#!/usr/bin/env python3
"""
rment - remove files and directories in bulk

Resolves every ENTRY against the current working directory, removes it
(a regular file or a whole directory tree) and finishes with a report of
what was removed, what failed and what was missing. A failing entry never
stops the batch and never changes the exit status.

Usage:
    rment file.txt build/ ../old-logs    # Remove three entries
    rment --no-progress dist/ build/     # Without the progress bar
    rment -v cache/                      # Log every step to the console
"""

import argparse
import logging
import pathlib
import sys
from typing import Optional

from auxiliary import format_path_for_display
from console_ui import ConsoleUI, PlainProgressSink, RichProgressSink
from entry_remover import EntryRemover, ProgressSink, RemovalReport
from entry_sanitizer import sanitize_entries
from logging_utils import configure_logging
from rment_config import ConfigManager
from rment_errors import ExitCode, RmentError

__version__ = "0.1.0"

LICENSE_TEXT = "This program is licensed under Apache-2.0 license."

logger = logging.getLogger(__name__)


class Rment:
    """Main application class for rment"""

    def __init__(
        self, args: argparse.Namespace, ui: Optional[ConsoleUI] = None, rment_dir: Optional[pathlib.Path] = None
    ):
        self.args = args
        self.ui = ui or ConsoleUI()

        self.config_manager = ConfigManager(rment_dir)
        self.config = self.config_manager.load()

        configure_logging(
            self.config_manager.log_file,
            level=self.config.log_level,
            verbose=getattr(args, "verbose", False),
            console=self.ui.console,
        )
        logger.debug("Initializing rment %s...", __version__)

    @property
    def show_progress(self) -> bool:
        if getattr(self.args, "no_progress", False):
            return False
        return self.config.show_progress

    def _create_sink(self) -> ProgressSink:
        if self.show_progress:
            return RichProgressSink(self.ui)
        return PlainProgressSink(self.ui)

    def show_configuration(self):
        self.ui.show_configuration(
            {
                "Config file": format_path_for_display(str(self.config_manager.config_file)),
                "Log file": format_path_for_display(str(self.config_manager.log_file)),
                "Log level": self.config.log_level,
                "Progress bar": "on" if self.show_progress else "off",
            }
        )

    def _record_run(self, report: RemovalReport):
        self.config.record_run(report)
        try:
            self.config_manager.save(self.config)
        except OSError as e:
            logger.warning("Could not save run statistics: %s", e)
            self.ui.print_warning(f"Could not save run statistics. {e}")

    def run(self) -> RemovalReport:
        """Sanitize the entries, remove them and show the final report"""
        logger.debug("Running rment...")
        if getattr(self.args, "verbose", False):
            self.show_configuration()

        paths = sanitize_entries(self.args.entries)

        remover = EntryRemover(self._create_sink())
        report = remover.remove_all(paths)

        self.ui.show_final_report(report)
        self._record_run(report)
        return report


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rment",
        description="rment - remove files and directories, with a final report",
        epilog=LICENSE_TEXT,
    )
    parser.add_argument("entries", metavar="ENTRY", nargs="+", help="Files or directories to remove")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step to the console")
    parser.add_argument("--no-progress", action="store_true", help="Do not draw the progress bar")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    ui = ConsoleUI()
    try:
        app = Rment(args, ui=ui)
        app.run()
    except RmentError as e:
        ui.print_error(e.message)
        return int(e.exit_code)

    return int(ExitCode.OK)


if __name__ == "__main__":
    sys.exit(main())
