"""
Interactive read-eval-print loop driving the dispatcher.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Optional

from rich.console import Console

from fileman.entities.session import Session
from fileman.exceptions import FileManagerError, OperationFailedError
from fileman.ports.console.line_source_port import LineSourcePort
from fileman.use_cases.commands.dispatch_command import CommandDispatcher

TERMINATION_SIGNALS: tuple[signal.Signals, ...] = tuple(
    sig
    for sig in (
        getattr(signal, name, None)
        for name in ("SIGHUP", "SIGINT", "SIGQUIT", "SIGTERM")
    )
    if sig is not None
)


class SessionLoop:
    """
    Read lines one at a time and dispatch them.

    Each line, including its asynchronous completion, finishes before the
    next one is read. Termination (``.exit``, end of input or a signal) is
    only acted on between commands.
    """

    def __init__(
        self,
        session: Session,
        dispatcher: CommandDispatcher,
        line_source: LineSourcePort,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._dispatcher = dispatcher
        self._line_source = line_source
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._stop: Optional[asyncio.Event] = None
        self._installed: list[signal.Signals] = []

    # ------------------------- output -------------------------
    def greet(self) -> None:
        self._say(f"Welcome to the File Manager, {self._session.username}!")

    def farewell(self) -> None:
        self._console.print()
        self._say(f"Thank you for using File Manager, {self._session.username}, goodbye!")

    def show_workdir(self) -> None:
        self._say(f"You are currently in {self._session.workdir.get()}")

    def show_prompt(self) -> None:
        self._console.print(">", end="", markup=False, highlight=False)

    def _say(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    # ------------------------- termination -------------------------
    def terminate(self) -> None:
        """Request termination; safe to call from a signal handler."""
        self._logger.info("Termination requested")
        self._session.request_exit()
        if self._stop is not None:
            self._stop.set()

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in TERMINATION_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.terminate)
            except (NotImplementedError, RuntimeError):
                # No loop-level signal support (e.g. Windows)
                try:
                    signal.signal(sig, lambda *_: loop.call_soon_threadsafe(self.terminate))
                except (OSError, ValueError) as e:
                    self._logger.debug(f"Cannot handle {sig.name}: {e}")
                    continue
            self._installed.append(sig)

    def _remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in self._installed:
            try:
                loop.remove_signal_handler(sig)
            except (NotImplementedError, RuntimeError):
                signal.signal(sig, signal.SIG_DFL)
        self._installed.clear()

    # ------------------------- loop -------------------------
    async def _next_line(self) -> Optional[str]:
        assert self._stop is not None
        read = asyncio.ensure_future(self._line_source.readline())
        stop = asyncio.ensure_future(self._stop.wait())
        done, pending = await asyncio.wait({read, stop}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        if read in done and self._session.is_running:
            return read.result()
        return None

    async def process_line(self, line: str) -> None:
        """Dispatch one non-blank line and report a failure by its message."""
        try:
            await self._dispatcher.dispatch(line)
        except FileManagerError as e:
            self._logger.info(f"Command failed: {line!r}: {e}")
            self._say(str(e))
        except Exception as e:
            self._logger.exception(f"Unexpected error while running {line!r}")
            self._say(str(OperationFailedError(e)))

    async def run(self, install_signals: bool = True) -> int:
        """
        Run until termination.

        Returns:
            Process exit status (always 0)
        """
        loop = asyncio.get_running_loop()
        self._stop = asyncio.Event()
        if install_signals:
            self._install_signal_handlers(loop)
        try:
            self.greet()
            self.show_workdir()
            self.show_prompt()
            while self._session.is_running:
                line = await self._next_line()
                if line is None:
                    break
                if not line.strip():
                    self.show_prompt()
                    continue
                await self.process_line(line)
                if not self._session.is_running:
                    break
                self.show_workdir()
                self.show_prompt()
        finally:
            if install_signals:
                self._remove_signal_handlers(loop)
            self._line_source.close()
        self._session.request_exit()
        self.farewell()
        return 0

