"""
Directory entry entity.
"""

from dataclasses import dataclass

DIRECTORY = "directory"
FILE = "file"


@dataclass(frozen=True)
class DirEntry:
    """A single immediate child of a directory."""

    name: str
    is_dir: bool

    @property
    def kind(self) -> str:
        # Anything that is not a directory is reported as a file
        return DIRECTORY if self.is_dir else FILE

    def sort_key(self) -> tuple[int, str]:
        """Directories first, then by name."""
        return (0 if self.is_dir else 1, self.name)
