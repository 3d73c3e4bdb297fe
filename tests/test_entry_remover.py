"""Tests for entry_remover."""

import os
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from entry_remover import (
    COUNTER_NAMES,
    EntryOutcome,
    EntryRemover,
    EntryResult,
    NullProgressSink,
    RemovalReport,
)


def test_end_to_end_scenario(scratch_tree, sink):
    paths = [scratch_tree["file"], scratch_tree["dir"], scratch_tree["missing"]]

    report = EntryRemover(sink).remove_all(paths)

    assert report.to_dict() == {
        "successful_file": 1,
        "successful_dir": 1,
        "failed_file": 0,
        "failed_dir": 0,
        "absent": 1,
        "skipped": 0,
    }
    assert not scratch_tree["file"].exists()
    assert not scratch_tree["dir"].exists()
    assert report.finalized
    assert not report.has_failures
    assert sink.messages == [f"Path does not exist: {scratch_tree['missing']}"]


def test_outcomes_per_entry(scratch_tree):
    remover = EntryRemover()
    assert remover.remove_entry(scratch_tree["file"]).outcome is EntryOutcome.REMOVED_FILE
    assert remover.remove_entry(scratch_tree["dir"]).outcome is EntryOutcome.REMOVED_DIRECTORY

    result = remover.remove_entry(scratch_tree["missing"])
    assert result.outcome is EntryOutcome.ABSENT
    assert result.error_message == f"Path does not exist: {scratch_tree['missing']}"


def test_removes_nested_directory_tree(workdir):
    deep = workdir / "top" / "a" / "b"
    deep.mkdir(parents=True)
    (deep / "leaf.txt").write_text("x")
    (workdir / "top" / "a" / "sibling.txt").write_text("y")

    report = EntryRemover().remove_all([workdir / "top"])

    assert report.successful_dir == 1
    assert not (workdir / "top").exists()


def test_outcome_completeness(workdir):
    paths = []
    for i in range(4):
        f = workdir / f"f{i}.txt"
        f.write_text("x")
        paths.append(f)
    for i in range(3):
        d = workdir / f"d{i}"
        d.mkdir()
        paths.append(d)
    paths += [workdir / "gone1", workdir / "gone2"]

    report = EntryRemover().remove_all(paths)

    assert report.total == len(paths) == len(report.results)
    assert sum(report.to_dict()[name] for name in COUNTER_NAMES) == len(paths)


def test_duplicates_are_processed_independently(workdir):
    target = workdir / "once.txt"
    target.write_text("x")

    report = EntryRemover().remove_all([target, target])

    assert report.successful_file == 1
    assert report.absent == 1
    assert report.total == 2


def test_continue_on_error_after_file_failure(workdir, fail_unlink):
    locked = workdir / "locked.txt"
    locked.write_text("x")
    second = workdir / "second.txt"
    second.write_text("y")
    third = workdir / "third"
    third.mkdir()
    fail_unlink("locked.txt")

    report = EntryRemover().remove_all([locked, second, third])

    assert report.failed_file == 1
    assert report.successful_file == 1
    assert report.successful_dir == 1
    assert locked.exists()
    assert not second.exists()
    assert not third.exists()
    assert report.has_failures
    assert len(report.diagnostics) == 1
    assert report.diagnostics[0].startswith(f"Failed to remove file {locked}: ")
    assert "Permission denied" in report.diagnostics[0]


def test_continue_on_error_after_directory_failure(workdir):
    stuck = workdir / "stuck"
    stuck.mkdir()
    other = workdir / "other"
    other.mkdir()
    real_rmtree = shutil.rmtree

    def rmtree(path, *args, **kwargs):
        if os.path.basename(path) == "stuck":
            raise PermissionError(13, "Permission denied", str(path))
        return real_rmtree(path, *args, **kwargs)

    with patch("entry_remover.shutil.rmtree", side_effect=rmtree):
        report = EntryRemover().remove_all([stuck, other])

    assert report.failed_dir == 1
    assert report.successful_dir == 1
    assert stuck.exists()
    assert not other.exists()
    assert report.results[0].error_message.startswith(f"Failed to remove directory {stuck}: ")


def test_symlink_to_directory_removes_link_only(workdir):
    target = workdir / "real"
    target.mkdir()
    (target / "keep.txt").write_text("x")
    link = workdir / "link"
    link.symlink_to(target)

    result = EntryRemover().remove_entry(link)

    assert result.outcome is EntryOutcome.REMOVED_DIRECTORY
    assert not link.is_symlink()
    assert (target / "keep.txt").exists()


def test_symlink_to_file_removes_link_only(workdir):
    target = workdir / "real.txt"
    target.write_text("x")
    link = workdir / "link.txt"
    link.symlink_to(target)

    result = EntryRemover().remove_entry(link)

    assert result.outcome is EntryOutcome.REMOVED_FILE
    assert not link.is_symlink()
    assert target.exists()


def test_dangling_symlink_is_absent(workdir):
    link = workdir / "dangling"
    link.symlink_to(workdir / "nowhere")

    result = EntryRemover().remove_entry(link)

    assert result.outcome is EntryOutcome.ABSENT


def test_progress_events_in_order(workdir, sink):
    for name in ("x", "y", "z"):
        (workdir / name).write_text(name)
    paths = [workdir / "x", workdir / "missing", workdir / "z"]

    report = EntryRemover(sink).remove_all(paths)

    assert sink.events == [
        ("total", 3),
        ("label", "x"),
        ("advance", None),
        ("label", "missing"),
        ("println", f"Path does not exist: {workdir / 'missing'}"),
        ("advance", None),
        ("label", "z"),
        ("advance", None),
        ("finish", report.summary_line()),
    ]


def test_label_for_path_without_name(sink):
    def skip(path):
        return EntryResult(path, EntryOutcome.SKIPPED)

    with patch.object(EntryRemover, "remove_entry", side_effect=skip):
        EntryRemover(sink).remove_all([Path("/")])

    assert sink.labels == ["?"]


def test_empty_batch(sink):
    report = EntryRemover(sink).remove_all([])

    assert report.total == 0
    assert sink.events == [("total", 0), ("finish", report.summary_line())]


def test_default_sink_is_null():
    assert isinstance(EntryRemover().sink, NullProgressSink)


def test_summary_line():
    report = RemovalReport(successful_file=1, successful_dir=2, failed_file=3, failed_dir=4, absent=5)
    assert report.summary_line() == "Final Report: 1/2/3/4/5/0 | sfile/sdir/ffile/fdir/missing/skipped"


def test_record_counts_every_outcome_once(tmp_path):
    report = RemovalReport()
    for outcome in EntryOutcome:
        report.record(EntryResult(tmp_path, outcome))

    assert report.to_dict() == {name: 1 for name in COUNTER_NAMES}
    assert report.total == len(EntryOutcome)


def test_finalized_report_rejects_records(tmp_path):
    report = RemovalReport()
    report.finalize()

    with pytest.raises(RuntimeError):
        report.record(EntryResult(tmp_path, EntryOutcome.ABSENT))


def test_fifo_fails_as_directory_and_batch_continues(workdir):
    fifo = workdir / "pipe"
    os.mkfifo(fifo)
    after = workdir / "after.txt"
    after.write_text("x")

    report = EntryRemover().remove_all([fifo, after])

    assert report.failed_dir == 1
    assert report.successful_file == 1
    assert not after.exists()
    assert report.results[0].error_message.startswith(f"Failed to remove directory {fifo}: ")
    assert "Not a directory" in report.results[0].error_message


def test_undecodable_names_are_shown_lossily(workdir, sink):
    bad = workdir / os.fsdecode(b"bad\xff.txt")
    bad.write_text("x")
    missing = workdir / os.fsdecode(b"gone\xfe.txt")

    report = EntryRemover(sink).remove_all([bad, missing])

    assert report.successful_file == 1
    assert report.absent == 1
    assert not bad.exists()
    assert sink.labels == ["bad�.txt", "gone�.txt"]
    assert sink.messages == [f"Path does not exist: {os.fsencode(workdir).decode()}/gone�.txt"]
    assert sink.messages[0].encode("utf-8")
