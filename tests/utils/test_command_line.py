"""
Tests for command line splitting.
"""

import pytest

from fileman.entities.command import ParsedLine
from fileman.utils.command_line import split_command, split_params


class TestSplitCommand:
    """Test cases for split_command."""

    def test_command_with_arguments(self):
        assert split_command("cp a.txt dir") == ParsedLine("cp", "a.txt dir")

    def test_command_without_arguments(self):
        assert split_command("ls") == ParsedLine("ls", "")

    def test_arguments_are_not_trimmed(self):
        """Test that only the first space separates command and arguments."""
        assert split_command("cat   file.txt ") == ParsedLine("cat", "  file.txt ")

    def test_leading_space_gives_empty_command(self):
        assert split_command(" ls").command == ""


class TestSplitParams:
    """Test cases for split_params."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a b", ["a", "b"]),
            ("  a   b  ", ["a", "b"]),
            ("", []),
            ("   ", []),
            ("single", ["single"]),
        ],
    )
    def test_split(self, raw, expected):
        assert split_params(raw) == expected

    def test_quotes_are_not_special(self):
        """Test that quoting does not group words."""
        assert split_params('"my file.txt" dir') == ['"my', 'file.txt"', "dir"]
