"""
Registry mapping command names to their handlers.
"""

from typing import Iterator, Optional, Union

from fileman.entities.command import CommandName
from fileman.ports.commands.command_handler_port import CommandHandlerPort


def _key(name: Union[CommandName, str]) -> str:
    return name.value if isinstance(name, CommandName) else name


class CommandRegistry:
    """
    Name -> handler table, assembled once at startup.

    Lookup is by exact string match. After :meth:`freeze` no more handlers
    can be registered.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandlerPort] = {}
        self._frozen = False

    def register(self, name: Union[CommandName, str], handler: CommandHandlerPort) -> "CommandRegistry":
        """
        Bind a handler to a command name.

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If the name is empty or already registered
        """
        key = _key(name)
        if self._frozen:
            raise RuntimeError(f"Cannot register '{key}': registry is frozen")
        if not key or " " in key:
            raise ValueError(f"Invalid command name: {key!r}")
        if key in self._handlers:
            raise ValueError(f"Command already registered: {key}")
        self._handlers[key] = handler
        return self

    def freeze(self) -> "CommandRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[CommandHandlerPort]:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
