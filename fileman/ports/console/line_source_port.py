"""
Port for the interactive input line source.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LineSourcePort(ABC):
    """Port interface for reading user input one line at a time."""

    @abstractmethod
    async def readline(self) -> Optional[str]:
        """
        Wait for the next line.

        Returns:
            The line without its trailing newline, or None at end of input
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the input source."""
        pass
