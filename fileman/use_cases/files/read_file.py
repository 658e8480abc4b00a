"""
Use case for printing a file's contents (``cat``).
"""

import logging
import sys
from typing import BinaryIO, Optional

from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.paths import PathResolver
from fileman.utils.streams import DEFAULT_CHUNK_SIZE, pump


class ReadFileUseCase(FileCommandUseCase):
    """Stream a file's raw bytes to the console output."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        output: Optional[BinaryIO] = None,
    ):
        super().__init__(file_system, resolver, logger, chunk_size)
        self._output = output

    def _sink(self) -> BinaryIO:
        if self._output is not None:
            return self._output
        # Text written through sys.stdout must not overtake the raw bytes
        sys.stdout.flush()
        return sys.stdout.buffer

    def _read(self, path: str) -> None:
        with self._fs.open_read(path) as src:
            pump(src, self._sink(), chunk_size=self._chunk_size)

    @override
    async def execute(self, args: str) -> None:
        target = args.strip()
        if not target:
            raise InvalidInputError()
        path = self._resolver.resolve(target)
        self._logger.info(f"Reading file: {path}")
        await self._run_io(self._read, path)
