"""
Use cases for Brotli compression and decompression (``compress``/``decompress``).
"""

import logging
from typing import Callable, Optional

from rich.console import Console
from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.ports.codecs.stream_transform_port import StreamTransformPort
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.command_line import split_params
from fileman.utils.paths import PathResolver
from fileman.utils.streams import DEFAULT_CHUNK_SIZE


class TransformFileUseCase(FileCommandUseCase):
    """
    Stream a file through a transform into a new destination file.

    Args are ``<path> <destpath>``; the destination is a full file path and
    is never overwritten.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: PathResolver,
        transform_factory: Callable[[], StreamTransformPort],
        console: Console,
        verb: str,
        logger: Optional[logging.Logger] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            resolver: Resolver bound to the session's virtual workdir
            transform_factory: Builds a fresh transform per invocation
            console: Console for the completion message
            verb: Word used in the completion message, e.g. "compress"
            logger: Logger instance to use for logging
            chunk_size: Read size for streamed copies
        """
        super().__init__(file_system, resolver, logger, chunk_size)
        self._transform_factory = transform_factory
        self._console = console
        self._verb = verb

    @override
    async def execute(self, args: str) -> None:
        params = split_params(args)
        if len(params) < 2:
            raise InvalidInputError()
        source = self._resolver.resolve(params[0])
        destination = self._resolver.resolve(params[1])
        self._logger.info(f"Running {self._verb} from {source} to {destination}")
        await self._run_io(
            self._stream_to_new_file, source, destination, self._transform_factory()
        )
        self._console.print(
            f"Done {self._verb} to '{destination}'", markup=False, highlight=False
        )
