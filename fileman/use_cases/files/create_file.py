"""
Use case for creating an empty file in the working directory (``add``).
"""

from typing_extensions import override

from fileman.exceptions import InvalidInputError
from fileman.use_cases.files.base import FileCommandUseCase
from fileman.utils.paths import is_bare_filename


class CreateFileUseCase(FileCommandUseCase):
    @override
    async def execute(self, args: str) -> None:
        name = args.strip()
        if not is_bare_filename(name):
            raise InvalidInputError()
        path = self._resolver.resolve_in_workdir(name)
        self._logger.info(f"Creating file: {path}")
        handle = await self._run_io(self._fs.create_exclusive, path)
        handle.close()
