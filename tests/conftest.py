"""
Pytest configuration and shared fixtures.
"""

import io
import os
from typing import Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from fileman.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileman.container import DependencyContainer
from fileman.entities.workdir import Workdir
from fileman.ports.console.line_source_port import LineSourcePort
from fileman.utils.paths import PathResolver


class FakeLineSource(LineSourcePort):
    """Line source replaying a fixed list of lines, then end of input."""

    def __init__(self, lines: list[str]):
        self._lines = list(lines)
        self.consumed: list[str] = []
        self.closed = False

    async def readline(self) -> Optional[str]:
        if self.closed or not self._lines:
            return None
        line = self._lines.pop(0)
        self.consumed.append(line)
        return line

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def temp_directory(tmp_path):
    """
    Create a temporary directory tree for testing file operations.

    Returns:
        Path to the temporary directory
    """
    temp_dir = str(tmp_path)
    with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
        f.write("This is a test file.")

    with open(os.path.join(temp_dir, "test2.py"), "w") as f:
        f.write("print('Hello, world!')")

    subdir = os.path.join(temp_dir, "subdir")
    os.makedirs(subdir)
    with open(os.path.join(subdir, "test3.md"), "w") as f:
        f.write("# Test Markdown\n\nThis is a test.")

    return temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def workdir(temp_directory):
    return Workdir(temp_directory)


@pytest.fixture
def resolver(workdir):
    return PathResolver(workdir)


@pytest.fixture
def file_system(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def console():
    """Console that records plain output into a StringIO (read it via console.file.getvalue())."""
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def make_container(monkeypatch, temp_directory, console):
    """
    Factory for dependency containers rooted at the temporary directory.

    Returns:
        Callable taking the input lines and returning a DependencyContainer
    """
    monkeypatch.setenv("FILEMAN_START_DIR", temp_directory)
    monkeypatch.setenv("FILEMAN_USERNAME", "tester")
    monkeypatch.delenv("FILEMAN_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("FILEMAN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FILEMAN_LOG_FILE", raising=False)

    def _make(lines: Optional[list[str]] = None) -> DependencyContainer:
        return DependencyContainer(console=console, line_source=FakeLineSource(lines or []))

    return _make


@pytest.fixture
def make_line_source():
    """Factory for FakeLineSource instances."""
    return FakeLineSource
