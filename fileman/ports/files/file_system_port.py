"""
File system port interface defining the capabilities the command handlers use.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from fileman.entities.dir_entry import DirEntry


class FileSystemPort(ABC):
    """Port interface for raw filesystem operations on absolute paths."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """
        Check whether a path exists and is a directory.

        Args:
            path: Absolute path to check

        Returns:
            True if the path is an existing directory
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether anything exists at a path.

        Args:
            path: Absolute path to check

        Returns:
            True if a file, directory or other entry exists there
        """
        pass

    @abstractmethod
    def list_dir(self, directory: str) -> list[DirEntry]:
        """
        List the immediate entries of a directory, unsorted.

        Args:
            directory: Absolute path of the directory

        Returns:
            List of DirEntry entities

        Raises:
            OperationFailedError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """
        Open an existing file for binary reading.

        Args:
            path: Absolute path of the file

        Returns:
            A binary stream; the caller closes it

        Raises:
            OperationFailedError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def create_exclusive(self, path: str) -> BinaryIO:
        """
        Create a new file for binary writing, failing if it already exists.

        Args:
            path: Absolute path of the file to create

        Returns:
            A binary stream; the caller closes it

        Raises:
            OperationFailedError: If the file exists or cannot be created
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """
        Rename a file, never replacing an existing destination.

        Args:
            source: Absolute path of the existing file
            destination: Absolute path of the new name

        Raises:
            OperationFailedError: If the destination exists or the rename fails
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """
        Delete a file.

        Args:
            path: Absolute path of the file

        Raises:
            OperationFailedError: If the file cannot be removed
        """
        pass
