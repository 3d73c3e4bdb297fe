#!/usr/bin/env python3
"""
Entry Removal Module

Removes files and directory trees one entry at a time, classifies what
happened to each entry and folds the outcomes into a removal report.
A failing entry never stops the batch.
"""

import errno
import logging
import os
import pathlib
import shutil
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from auxiliary import display_path

logger = logging.getLogger(__name__)


class EntryOutcome(Enum):
    """What happened to a single entry"""

    REMOVED_FILE = "removed_file"
    REMOVED_DIRECTORY = "removed_directory"
    FAILED_FILE = "failed_file"
    FAILED_DIRECTORY = "failed_directory"
    ABSENT = "absent"
    SKIPPED = "skipped"  # reserved, nothing is filtered yet


@dataclass
class EntryResult:
    """Result of removing a single entry"""

    path: pathlib.Path
    outcome: EntryOutcome
    error_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.outcome in (EntryOutcome.FAILED_FILE, EntryOutcome.FAILED_DIRECTORY)


_COUNTER_FOR_OUTCOME = {
    EntryOutcome.REMOVED_FILE: "successful_file",
    EntryOutcome.REMOVED_DIRECTORY: "successful_dir",
    EntryOutcome.FAILED_FILE: "failed_file",
    EntryOutcome.FAILED_DIRECTORY: "failed_dir",
    EntryOutcome.ABSENT: "absent",
    EntryOutcome.SKIPPED: "skipped",
}

COUNTER_NAMES = tuple(_COUNTER_FOR_OUTCOME.values())


@dataclass
class RemovalReport:
    """Outcome counters for one removal run"""

    successful_file: int = 0
    successful_dir: int = 0
    failed_file: int = 0
    failed_dir: int = 0
    absent: int = 0
    skipped: int = 0
    results: list[EntryResult] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
    finalized: bool = False

    def record(self, result: EntryResult):
        """Count one entry result"""
        if self.finalized:
            raise RuntimeError("Cannot record results on a finalized report")
        counter = _COUNTER_FOR_OUTCOME[result.outcome]
        setattr(self, counter, getattr(self, counter) + 1)
        self.results.append(result)

    def finalize(self):
        self.finalized = True

    @property
    def total(self) -> int:
        return sum(getattr(self, name) for name in COUNTER_NAMES)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed_file or self.failed_dir)

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in COUNTER_NAMES}

    def summary_line(self) -> str:
        counts = "/".join(str(getattr(self, name)) for name in COUNTER_NAMES)
        return f"Final Report: {counts} | sfile/sdir/ffile/fdir/missing/skipped"


class ProgressSink(Protocol):
    """Consumer of removal progress events"""

    def set_total(self, total: int) -> None: ...

    def set_label(self, label: str) -> None: ...

    def advance(self) -> None: ...

    def println(self, message: str) -> None: ...

    def finish(self, summary: str) -> None: ...


class NullProgressSink:
    """Progress sink that drops every event"""

    def set_total(self, total: int):
        pass

    def set_label(self, label: str):
        pass

    def advance(self):
        pass

    def println(self, message: str):
        pass

    def finish(self, summary: str):
        pass


class RecordingProgressSink:
    """Progress sink that keeps every event as a (name, value) tuple"""

    def __init__(self):
        self.events: list[tuple[str, object]] = []

    def set_total(self, total: int):
        self.events.append(("total", total))

    def set_label(self, label: str):
        self.events.append(("label", label))

    def advance(self):
        self.events.append(("advance", None))

    def println(self, message: str):
        self.events.append(("println", message))

    def finish(self, summary: str):
        self.events.append(("finish", summary))

    @property
    def labels(self) -> list[str]:
        return [value for name, value in self.events if name == "label"]

    @property
    def messages(self) -> list[str]:
        return [value for name, value in self.events if name == "println"]


def _entry_label(path: pathlib.Path) -> str:
    return display_path(path.name) or "?"


def _exists(path: pathlib.Path) -> bool:
    # an entry that cannot be stat'ed is reported as missing
    try:
        return path.exists()
    except OSError:
        return False


def _remove_tree(path: pathlib.Path):
    # rmtree refuses symlinks; drop the link itself, never its target
    if path.is_symlink():
        path.unlink()
        return
    # rmtree would block opening a fifo
    if not path.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
    shutil.rmtree(path)


class EntryRemover:
    """Sequential remover for normalized entries"""

    def __init__(self, sink: Optional[ProgressSink] = None):
        """Initialize with an optional progress sink"""
        self.sink = sink if sink is not None else NullProgressSink()

    def remove_entry(self, path: pathlib.Path) -> EntryResult:
        """Remove a single entry and classify the outcome"""
        shown = display_path(path)
        if not _exists(path):
            return EntryResult(path, EntryOutcome.ABSENT, f"Path does not exist: {shown}")

        if path.is_file():
            try:
                path.unlink()
            except OSError as e:
                message = f"Failed to remove file {shown}: {display_path(str(e))}"
                return EntryResult(path, EntryOutcome.FAILED_FILE, message)
            return EntryResult(path, EntryOutcome.REMOVED_FILE)

        try:
            _remove_tree(path)
        except OSError as e:
            message = f"Failed to remove directory {shown}: {display_path(str(e))}"
            return EntryResult(path, EntryOutcome.FAILED_DIRECTORY, message)
        return EntryResult(path, EntryOutcome.REMOVED_DIRECTORY)

    def remove_all(self, paths: list[pathlib.Path]) -> RemovalReport:
        """Remove every entry in order and return the finalized report"""
        logger.debug("Removing %d entries...", len(paths))
        report = RemovalReport()
        self.sink.set_total(len(paths))

        for path in paths:
            self.sink.set_label(_entry_label(path))
            result = self.remove_entry(path)
            logger.debug("%s: %s", display_path(path), result.outcome.value)

            if result.error_message:
                # the sink already shows diagnostics on the console
                level = logging.WARNING if result.failed else logging.INFO
                logger.log(level, result.error_message, extra={"console": False})
                report.diagnostics.append(result.error_message)
                self.sink.println(result.error_message)

            report.record(result)
            self.sink.advance()

        report.finalize()
        logger.info(report.summary_line())
        self.sink.finish(report.summary_line())
        return report
