"""
Use case bound to ``.exit``.
"""

from typing_extensions import override

from fileman.entities.session import Session
from fileman.ports.commands.command_handler_port import CommandHandlerPort


class ExitSessionUseCase(CommandHandlerPort):
    """Ask the session to terminate; the session loop does the rest."""

    def __init__(self, session: Session):
        self._session = session

    @override
    def execute(self, args: str) -> None:
        self._session.request_exit()
