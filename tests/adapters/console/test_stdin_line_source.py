"""
Tests for the StdinLineSource adapter.
"""

import asyncio
import io

from fileman.adapters.console.stdin_line_source import StdinLineSource


async def _read_all(source: StdinLineSource) -> list:
    lines = []
    while True:
        line = await asyncio.wait_for(source.readline(), timeout=5)
        lines.append(line)
        if line is None:
            return lines


class TestStdinLineSource:
    """Test cases for the StdinLineSource."""

    def test_reads_lines_then_end_of_input(self, mock_logger):
        """Test that newlines are stripped and end of input yields None."""
        source = StdinLineSource(io.StringIO("ls\r\n\ncd subdir\n"), mock_logger)

        lines = asyncio.run(_read_all(source))

        assert lines == ["ls", "", "cd subdir", None]

    def test_closed_source_returns_none(self, mock_logger):
        source = StdinLineSource(io.StringIO("ls\n"), mock_logger)
        source.close()

        assert asyncio.run(source.readline()) is None
