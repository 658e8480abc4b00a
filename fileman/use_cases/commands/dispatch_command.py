"""
Dispatcher routing input lines to registered command handlers.
"""

import inspect
import logging
from typing import Optional

from fileman.exceptions import InvalidInputError
from fileman.use_cases.commands.command_registry import CommandRegistry
from fileman.utils.command_line import split_command


class CommandDispatcher:
    """
    Parse a line, look up its handler and run it.

    Handler errors propagate unchanged; the only errors raised here are for
    unknown commands.
    """

    def __init__(self, registry: CommandRegistry, logger: Optional[logging.Logger] = None):
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    async def dispatch(self, line: str) -> None:
        """
        Execute one input line.

        Blank lines are ignored without a registry lookup.

        Args:
            line: Raw input line, without its trailing newline

        Raises:
            InvalidInputError: For unknown commands, or from the handler
            OperationFailedError: From the handler
        """
        if not line.strip():
            self._logger.debug("Ignoring blank line")
            return
        parsed = split_command(line)
        handler = self._registry.get(parsed.command)
        if handler is None:
            raise InvalidInputError(f"unknown command '{parsed.command}'")
        self._logger.info(f"Dispatching command: {parsed.command}")
        # Sync handlers raise here, async ones when awaited: same contract
        result = handler.execute(parsed.raw_args)
        if inspect.isawaitable(result):
            await result
