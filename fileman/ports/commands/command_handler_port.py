"""
Port for command handlers bound to command names.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Optional


class CommandHandlerPort(ABC):
    """
    Port interface for a single command.

    Handlers receive the raw, unparsed argument string and either return
    None or an awaitable. Failures are raised as InvalidInputError or
    OperationFailedError.
    """

    @abstractmethod
    def execute(self, args: str) -> Optional[Awaitable[None]]:
        """
        Run the command.

        Args:
            args: Everything after the first space of the input line

        Raises:
            InvalidInputError: If the arguments are malformed
            OperationFailedError: If the underlying operation fails
        """
        pass
