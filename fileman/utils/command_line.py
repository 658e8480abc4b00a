"""Splitting of raw input lines.

Quoting is not supported: an argument can never contain a space.
"""

from fileman.entities.command import ParsedLine


def split_command(line: str) -> ParsedLine:
    """Split a line on its first space into command token and raw arguments."""
    command, _, raw_args = line.partition(" ")
    return ParsedLine(command=command, raw_args=raw_args)


def split_params(raw_args: str) -> list[str]:
    """Split raw arguments on spaces, trimming tokens and dropping empty ones."""
    tokens = (token.strip() for token in raw_args.split(" "))
    return [token for token in tokens if token]
