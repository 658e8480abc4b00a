"""Path resolution against the virtual working directory.

Resolution never touches the filesystem: the result depends only on the
target string and the workdir value at call time.
"""

from __future__ import annotations

import os

from fileman.entities.workdir import Workdir
from fileman.exceptions import InvalidInputError


def _ensure_drive_root(target: str) -> str:
    # "d:" and "d:foo" are read from the root of drive d, never against the
    # process's per-drive cwd. splitdrive() never returns a drive on POSIX.
    drive, rest = os.path.splitdrive(target)
    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    if drive and not rest.startswith(separators):
        return drive + os.sep + rest
    return target


class PathResolver:
    """Turn user-supplied paths into normalized absolute paths."""

    def __init__(self, workdir: Workdir):
        self._workdir = workdir

    def resolve(self, target: str) -> str:
        """
        Resolve a relative or absolute path.

        Args:
            target: Path as typed by the user

        Returns:
            Normalized absolute path

        Raises:
            InvalidInputError: If target is empty, blank or cannot be made absolute
        """
        if not target or not target.strip():
            raise InvalidInputError()
        target = _ensure_drive_root(target)
        if os.path.isabs(target):
            resolved = os.path.normpath(target)
        else:
            resolved = os.path.normpath(os.path.join(self._workdir.get(), target))
        if not os.path.isabs(resolved):
            raise InvalidInputError(f"cannot resolve {target!r} to an absolute path")
        return resolved

    def resolve_in_workdir(self, filename: str) -> str:
        """Join a bare filename onto the workdir."""
        return os.path.normpath(os.path.join(self._workdir.get(), filename))


def is_bare_filename(name: str) -> bool:
    """True for a non-empty name without separators that is not '.' or '..'."""
    if not name or name in (os.curdir, os.pardir):
        return False
    if os.path.basename(name) != name:
        return False
    if os.altsep and os.altsep in name:
        return False
    return not os.path.splitdrive(name)[0]
