"""
Custom exceptions for the file manager.
"""

from typing import Optional


class FileManagerError(Exception):
    """Base exception class for file manager errors."""

    pass


class InvalidInputError(FileManagerError):
    """Exception raised for malformed or missing command input."""

    message = "Invalid input"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class OperationFailedError(FileManagerError):
    """
    Exception raised when a filesystem or system operation fails.

    The low-level cause is kept on ``cause`` for logging but never becomes
    part of the user-visible message.
    """

    message = "Operation failed"

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(self.message)


class ConfigurationError(FileManagerError):
    """Exception raised for configuration errors."""

    pass
