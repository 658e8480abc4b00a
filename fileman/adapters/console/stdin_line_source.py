"""
Line source reading standard input on a background thread.
"""

import asyncio
import logging
import sys
import threading
from typing import Optional, TextIO

from typing_extensions import override

from fileman.ports.console.line_source_port import LineSourcePort


class StdinLineSource(LineSourcePort):
    """
    Feeds lines from a text stream into an asyncio queue.

    The reader is a daemon thread so a blocking ``readline`` never keeps the
    process alive after the session ends.
    """

    def __init__(self, stream: TextIO | None = None, logger: logging.Logger | None = None):
        self._stream = stream or sys.stdin
        self._logger = logger or logging.getLogger(__name__)
        self._queue: Optional[asyncio.Queue[Optional[str]]] = None
        self._thread: Optional[threading.Thread] = None
        self._closed = threading.Event()

    def _start(self) -> None:
        loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        queue = self._queue

        def _reader() -> None:
            while not self._closed.is_set():
                try:
                    line = self._stream.readline()
                except (OSError, ValueError) as e:
                    self._logger.warning(f"Input stream failed: {e}")
                    line = ""
                if self._closed.is_set():
                    return
                item = line.rstrip("\r\n") if line else None
                try:
                    loop.call_soon_threadsafe(queue.put_nowait, item)
                except RuntimeError:
                    # Loop already closed
                    return
                if item is None:
                    return

        self._thread = threading.Thread(target=_reader, name="stdin-reader", daemon=True)
        self._thread.start()

    @override
    async def readline(self) -> Optional[str]:
        if self._closed.is_set():
            return None
        if self._queue is None:
            self._start()
        assert self._queue is not None
        return await self._queue.get()

    @override
    def close(self) -> None:
        self._closed.set()
