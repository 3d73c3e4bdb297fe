"""Shared pytest fixtures for rment tests."""

import pathlib

import pytest

from entry_remover import RecordingProgressSink


@pytest.fixture
def rment_home(tmp_path, monkeypatch):
    """Point the home directory (and so ~/.rment) at a scratch location."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """A scratch working directory the process is chdir'ed into."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def sink():
    return RecordingProgressSink()


@pytest.fixture
def scratch_tree(workdir):
    """file1.txt and dir/file2.txt under the working directory."""
    file1 = workdir / "file1.txt"
    file1.write_text("Laboriosam sapiente dolorum deleniti est dolor.")

    directory = workdir / "dir"
    directory.mkdir()
    (directory / "file2.txt").write_text("Deserunt rerum quam excepturi magnam quia.")

    return {"file": file1, "dir": directory, "missing": workdir / "missing.txt"}


@pytest.fixture
def fail_unlink(monkeypatch):
    """Make Path.unlink raise PermissionError for the given file names."""
    original_unlink = pathlib.Path.unlink

    def install(*names):
        def unlink(self, missing_ok=False):
            if self.name in names:
                raise PermissionError(13, "Permission denied", str(self))
            return original_unlink(self, missing_ok=missing_ok)

        monkeypatch.setattr(pathlib.Path, "unlink", unlink)

    return install
