"""
Shared plumbing for handlers that resolve paths and perform file I/O.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from fileman.exceptions import FileManagerError, OperationFailedError
from fileman.ports.codecs.stream_transform_port import StreamTransformPort
from fileman.ports.commands.command_handler_port import CommandHandlerPort
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.utils.paths import PathResolver
from fileman.utils.streams import DEFAULT_CHUNK_SIZE, pump

T = TypeVar("T")


class FileCommandUseCase(CommandHandlerPort):
    """Base for command handlers working on resolved paths."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            resolver: Resolver bound to the session's virtual workdir
            logger: Logger instance to use for logging
            chunk_size: Read size for streamed copies
        """
        self._fs = file_system
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    async def _run_io(self, func: Callable[..., T], *args: Any) -> T:
        """
        Run blocking I/O off the event loop.

        FileManagerError passes through unchanged; anything else becomes
        OperationFailedError.
        """
        try:
            return await asyncio.to_thread(func, *args)
        except FileManagerError:
            raise
        except Exception as e:
            self._logger.error(f"Unexpected I/O error: {e}")
            raise OperationFailedError(e) from e

    def _stream_to_new_file(
        self,
        source: str,
        destination: str,
        transform: Optional[StreamTransformPort] = None,
    ) -> None:
        """
        Copy ``source`` into a newly created ``destination``.

        The source is opened first and the destination is created exclusively.
        A destination created here is removed again if the copy fails.
        """
        with self._fs.open_read(source) as src:
            dst = self._fs.create_exclusive(destination)
            try:
                with dst:
                    pump(src, dst, transform, self._chunk_size)
            except Exception:
                self._discard(destination)
                raise

    def _discard(self, path: str) -> None:
        try:
            self._fs.remove(path)
        except FileManagerError:
            self._logger.warning(f"Could not remove partial file {path}")
