"""
Session domain entity.
"""

from enum import Enum

from fileman.entities.workdir import Workdir


class SessionState(str, Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


class Session:
    """
    State owned by one interactive session: banner name, virtual working
    directory and lifecycle state.
    """

    def __init__(self, username: str, workdir: Workdir):
        self.username = username
        self.workdir = workdir
        self._state = SessionState.RUNNING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    def request_exit(self) -> None:
        """Move the session to TERMINATING. The transition is one-way."""
        self._state = SessionState.TERMINATING

    def __repr__(self) -> str:
        return (
            f"Session(username='{self.username}', workdir='{self.workdir.get()}', "
            f"state='{self._state.value}')"
        )
