"""
Tests for the Workdir and Session entities.
"""

import os

import pytest

from fileman.entities.dir_entry import DirEntry
from fileman.entities.session import Session, SessionState
from fileman.entities.workdir import Workdir


class TestWorkdir:
    """Test cases for the Workdir entity."""

    def test_get_returns_initial_value(self, temp_directory):
        """Test that the initial directory is returned unchanged."""
        assert Workdir(temp_directory).get() == temp_directory

    def test_set_does_not_check_existence(self, temp_directory):
        """Test that set accepts absolute paths that do not exist."""
        workdir = Workdir(temp_directory)
        missing = os.path.join(temp_directory, "does-not-exist")

        workdir.set(missing)

        assert workdir.get() == missing

    def test_set_rejects_relative_path(self, temp_directory):
        """Test that a relative path is rejected."""
        workdir = Workdir(temp_directory)

        with pytest.raises(ValueError, match="absolute"):
            workdir.set("relative/dir")

        assert workdir.get() == temp_directory

    def test_rejects_empty_initial_value(self):
        """Test that an empty initial value is rejected."""
        with pytest.raises(ValueError):
            Workdir("")


class TestSession:
    """Test cases for the Session entity."""

    def test_starts_running(self, workdir):
        session = Session("alice", workdir)

        assert session.is_running
        assert session.state is SessionState.RUNNING

    def test_request_exit_is_absorbing(self, workdir):
        """Test that once terminating the session never runs again."""
        session = Session("alice", workdir)

        session.request_exit()
        session.request_exit()

        assert not session.is_running
        assert session.state is SessionState.TERMINATING


class TestDirEntry:
    """Test cases for the DirEntry entity."""

    def test_kind(self):
        assert DirEntry("b", is_dir=True).kind == "directory"
        assert DirEntry("a.txt", is_dir=False).kind == "file"

    def test_sort_puts_directories_first(self):
        entries = [
            DirEntry("a.txt", False),
            DirEntry("z", True),
            DirEntry("b", True),
            DirEntry("0.txt", False),
        ]

        ordered = sorted(entries, key=DirEntry.sort_key)

        assert [e.name for e in ordered] == ["b", "z", "0.txt", "a.txt"]
