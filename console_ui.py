#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled output, the removal progress bar and the final report table for rment.
"""

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn, TimeElapsedColumn
from rich.table import Table

from auxiliary import truncate_label
from entry_remover import RemovalReport


class ConsoleUI:
    """Console UI handler using Rich"""

    def __init__(self, force_terminal: Optional[bool] = None, console: Optional[Console] = None):
        """Initialize console with optional terminal forcing"""
        self.console = console or Console(force_terminal=force_terminal, highlight=False)

    # Basic styled output methods
    def print_error(self, message: str):
        """Print error message in red"""
        self.console.print(message, style="red bold")

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.console.print(message, style="yellow")

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.console.print(message, style="cyan")

    def show_configuration(self, config: dict[str, Any]):
        """Display configuration in a formatted table"""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Setting", style="cyan dim", min_width=20, justify="right")
        table.add_column("Value", style="cyan", min_width=30)

        for key, value in config.items():
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            table.add_row(key, str(value))

        self.console.print(table)

    def create_progress(self) -> Progress:
        """Create a Rich progress bar for removal runs"""
        return Progress(
            TimeElapsedColumn(),
            BarColumn(bar_width=40, style="blue", complete_style="cyan"),
            TextColumn("({task.completed:>7.0f}/{task.total:<7.0f})"),
            TextColumn("{task.description}", markup=False),
            console=self.console,
        )

    def show_final_report(self, report: RemovalReport):
        """Show the six outcome counters of a removal run"""
        table = Table(title="Final Report", box=box.ROUNDED, show_lines=False)
        table.add_column("Outcome", min_width=16)
        table.add_column("Count", justify="right", min_width=6)

        rows = [
            ("Removed files", report.successful_file, "green"),
            ("Removed dirs", report.successful_dir, "green"),
            ("Failed files", report.failed_file, "red"),
            ("Failed dirs", report.failed_dir, "red"),
            ("Missing", report.absent, "magenta"),
            ("Skipped", report.skipped, "yellow"),
        ]
        for label, count, style in rows:
            table.add_row(f"[{style}]{label}[/{style}]", f"[{style} bold]{count}[/{style} bold]")

        self.console.print(table)
        self.console.print(report.summary_line(), style="dim")

        if report.has_failures:
            self.print_warning("Some entries could not be removed, see messages above")


class RichProgressSink:
    """Progress sink drawing a Rich progress bar"""

    def __init__(self, ui: ConsoleUI):
        self.ui = ui
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def set_total(self, total: int):
        self._progress = self.ui.create_progress()
        self._progress.start()
        self._task = self._progress.add_task("", total=total)

    def set_label(self, label: str):
        if self._progress is not None:
            self._progress.update(self._task, description=truncate_label(label))

    def advance(self):
        if self._progress is not None:
            self._progress.advance(self._task)

    def println(self, message: str):
        self.ui.console.print(message, style="yellow", markup=False)

    def finish(self, summary: str):
        if self._progress is not None:
            self._progress.update(self._task, description="OK")
            self._progress.stop()
            self._progress = None


class PlainProgressSink:
    """Progress sink without a bar, diagnostics only"""

    def __init__(self, ui: ConsoleUI):
        self.ui = ui

    def set_total(self, total: int):
        self.ui.print_info(f"Removing {total} entries...")

    def set_label(self, label: str):
        pass

    def advance(self):
        pass

    def println(self, message: str):
        self.ui.console.print(message, style="yellow", markup=False)

    def finish(self, summary: str):
        pass
