"""
Use case for copying a file into another directory (``cp``).
"""

import os

from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.command_line import split_params


class CopyFileUseCase(FileCommandUseCase):
    """Copy a file into a directory, keeping its name and never overwriting."""

    def _target_paths(self, args: str) -> tuple[str, str]:
        params = split_params(args)
        if len(params) < 2:
            raise InvalidInputError()
        source = self._resolver.resolve(params[0])
        directory = self._resolver.resolve(params[1])
        return source, os.path.join(directory, os.path.basename(source))

    async def copy(self, args: str) -> tuple[str, str]:
        """
        Copy the file named by ``args`` and return (source, destination).

        Raises:
            InvalidInputError: If fewer than two tokens are given
            OperationFailedError: If reading, creating or writing fails
        """
        source, destination = self._target_paths(args)
        self._logger.info(f"Copying {source} to {destination}")
        await self._run_io(self._stream_to_new_file, source, destination)
        return source, destination

    @override
    async def execute(self, args: str) -> None:
        await self.copy(args)
