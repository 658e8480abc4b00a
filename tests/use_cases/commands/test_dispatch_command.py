"""
Tests for the CommandDispatcher.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from fileman.exceptions import InvalidInputError, OperationFailedError
from fileman.ports.commands.command_handler_port import CommandHandlerPort
from fileman.use_cases.commands.command_registry import CommandRegistry
from fileman.use_cases.commands.dispatch_command import CommandDispatcher


def _sync_handler(side_effect=None) -> MagicMock:
    handler = MagicMock(spec=CommandHandlerPort)
    handler.execute = MagicMock(return_value=None, side_effect=side_effect)
    return handler


def _async_handler(side_effect=None) -> MagicMock:
    handler = MagicMock(spec=CommandHandlerPort)
    handler.execute = AsyncMock(return_value=None, side_effect=side_effect)
    return handler


class TestCommandDispatcher:
    """Test cases for the CommandDispatcher."""

    def test_dispatch_passes_raw_arguments(self, mock_logger):
        """Test that the handler receives everything after the first space."""
        handler = _sync_handler()
        registry = CommandRegistry().register("cp", handler)

        asyncio.run(CommandDispatcher(registry, mock_logger).dispatch("cp  a.txt  dir "))

        handler.execute.assert_called_once_with(" a.txt  dir ")

    def test_dispatch_without_arguments(self, mock_logger):
        handler = _sync_handler()
        registry = CommandRegistry().register("ls", handler)

        asyncio.run(CommandDispatcher(registry, mock_logger).dispatch("ls"))

        handler.execute.assert_called_once_with("")

    def test_dispatch_awaits_async_handler(self, mock_logger):
        handler = _async_handler()
        registry = CommandRegistry().register("hash", handler)

        asyncio.run(CommandDispatcher(registry, mock_logger).dispatch("hash file"))

        handler.execute.assert_awaited_once_with("file")

    @pytest.mark.parametrize("line", ["", "   ", "\t"])
    def test_blank_line_never_reaches_registry(self, mock_logger, line):
        registry = MagicMock(spec=CommandRegistry)

        asyncio.run(CommandDispatcher(registry, mock_logger).dispatch(line))

        registry.get.assert_not_called()

    def test_unknown_command(self, mock_logger):
        registry = CommandRegistry().register("ls", _sync_handler())

        with pytest.raises(InvalidInputError, match="unknown command 'bogus'"):
            asyncio.run(CommandDispatcher(registry, mock_logger).dispatch("bogus arg"))

    @pytest.mark.parametrize("factory", [_sync_handler, _async_handler])
    @pytest.mark.parametrize("error", [InvalidInputError(), OperationFailedError()])
    def test_handler_errors_propagate_unchanged(self, mock_logger, factory, error):
        """Test that sync raises and async failures surface as the same exception."""
        registry = CommandRegistry().register("rm", factory(side_effect=error))

        with pytest.raises(type(error)) as exc_info:
            asyncio.run(CommandDispatcher(registry, mock_logger).dispatch("rm x"))

        assert exc_info.value is error
