"""
Use case for printing a file's SHA-256 digest (``hash``).
"""

import logging
from typing import Callable, Optional

from rich.console import Console
from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.ports.codecs.stream_transform_port import StreamTransformPort
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.paths import PathResolver
from fileman.utils.streams import DEFAULT_CHUNK_SIZE, pump


class CalculateHashUseCase(FileCommandUseCase):
    """Hash a file through a digest transform and print the hex digest."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: PathResolver,
        hasher_factory: Callable[[], StreamTransformPort],
        console: Console,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        super().__init__(file_system, resolver, logger, chunk_size)
        self._hasher_factory = hasher_factory
        self._console = console

    def _digest(self, path: str) -> str:
        with self._fs.open_read(path) as src:
            return pump(src, None, self._hasher_factory(), self._chunk_size).hex()

    async def digest(self, args: str) -> str:
        target = args.strip()
        if not target:
            raise InvalidInputError()
        path = self._resolver.resolve(target)
        self._logger.info(f"Hashing file: {path}")
        return await self._run_io(self._digest, path)

    @override
    async def execute(self, args: str) -> None:
        self._console.print(await self.digest(args), markup=False, highlight=False)
