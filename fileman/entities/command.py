"""
Command-level value types.
"""

from dataclasses import dataclass
from enum import Enum


class CommandName(str, Enum):
    """Names of the built-in commands, matched exactly against user input."""

    EXIT = ".exit"
    UP = "up"
    CD = "cd"
    LS = "ls"
    CAT = "cat"
    ADD = "add"
    RN = "rn"
    CP = "cp"
    MV = "mv"
    RM = "rm"
    OS = "os"
    HASH = "hash"
    COMPRESS = "compress"
    DECOMPRESS = "decompress"


@dataclass(frozen=True)
class ParsedLine:
    """One input line split into its command token and raw argument string."""

    command: str
    raw_args: str
