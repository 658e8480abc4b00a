"""
Use case for renaming a file inside its own directory (``rn``).
"""

import os

from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.command_line import split_params
from fileman.utils.paths import is_bare_filename


class RenameFileUseCase(FileCommandUseCase):
    """Rename a file; the new name must be a bare filename."""

    @override
    async def execute(self, args: str) -> None:
        params = split_params(args)
        if len(params) < 2 or not is_bare_filename(params[1]):
            raise InvalidInputError()
        source = self._resolver.resolve(params[0])
        destination = os.path.join(os.path.dirname(source), params[1])
        self._logger.info(f"Renaming {source} to {destination}")
        await self._run_io(self._fs.rename, source, destination)
