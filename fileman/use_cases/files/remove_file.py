"""
Use case for deleting a file (``rm``).
"""

from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.use_cases.files.base import FileCommandUseCase


class RemoveFileUseCase(FileCommandUseCase):
    @override
    async def execute(self, args: str) -> None:
        target = args.strip()
        if not target:
            raise InvalidInputError()
        path = self._resolver.resolve(target)
        self._logger.info(f"Removing file: {path}")
        await self._run_io(self._fs.remove, path)
