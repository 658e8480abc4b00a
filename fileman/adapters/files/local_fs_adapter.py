"""
Local file system adapter implementation for the command handlers.
"""

import errno
import logging
import os
from typing import BinaryIO

from typing_extensions import override

from fileman.entities.dir_entry import DirEntry
from fileman.exceptions import OperationFailedError
from fileman.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _failed(self, action: str, path: str, error: OSError) -> OperationFailedError:
        self._logger.warning(f"Could not {action} {path}: {error}")
        return OperationFailedError(error)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def list_dir(self, directory: str) -> list[DirEntry]:
        """
        List the immediate entries of a directory.

        Symlinks are reported by what they point to; entries whose type
        cannot be determined are reported as files.
        """
        try:
            with os.scandir(directory) as it:
                entries: list[DirEntry] = []
                for item in it:
                    try:
                        is_dir = item.is_dir()
                    except OSError as e:
                        self._logger.warning(f"Could not stat {item.path}: {e}")
                        is_dir = False
                    entries.append(DirEntry(name=item.name, is_dir=is_dir))
                return entries
        except OSError as e:
            raise self._failed("list", directory, e) from e

    @override
    def open_read(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise self._failed("open", path, e) from e

    @override
    def create_exclusive(self, path: str) -> BinaryIO:
        try:
            return open(path, "xb")
        except OSError as e:
            raise self._failed("create", path, e) from e

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            self._rename_no_replace(source, destination)
        except OSError as e:
            raise self._failed("rename", source, e) from e

    @staticmethod
    def _rename_no_replace(source: str, destination: str) -> None:
        # os.rename silently replaces on POSIX; a hard link fails atomically
        # with FileExistsError instead. Windows rename never replaces.
        if os.name == "nt" or os.path.isdir(source) or os.path.islink(source):
            if os.path.lexists(destination):
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), destination)
            os.rename(source, destination)
            return
        try:
            os.link(source, destination)
        except FileExistsError:
            raise
        except OSError:
            # No hard links on this filesystem
            if os.path.lexists(destination):
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), destination)
            os.rename(source, destination)
            return
        os.remove(source)


    @override
    def remove(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise self._failed("remove", path, e) from e
