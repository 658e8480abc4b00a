"""
Virtual working directory entity.
"""

import os


class Workdir:
    """
    The session's logical current directory.

    It is independent of the process working directory and is never checked
    for existence here: callers confirm the target is a directory before
    calling :meth:`set`.
    """

    def __init__(self, initial: str):
        self._current = ""
        self.set(initial)

    def get(self) -> str:
        """Return the current absolute directory path."""
        return self._current

    def set(self, path: str) -> None:
        """
        Replace the current directory.

        Args:
            path: Absolute directory path, already validated by the caller

        Raises:
            ValueError: If the path is not absolute
        """
        if not path or not os.path.isabs(path):
            raise ValueError(f"Working directory must be an absolute path: {path!r}")
        self._current = path

    def __str__(self) -> str:
        return self._current

    def __repr__(self) -> str:
        return f"Workdir(current='{self._current}')"
