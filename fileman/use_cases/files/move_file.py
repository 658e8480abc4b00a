"""
Use case for moving a file into another directory (``mv``).
"""

from typing_extensions import override

from fileman.use_cases.files.copy_file import CopyFileUseCase


class MoveFileUseCase(CopyFileUseCase):
    """Copy a file into a directory, then delete the original."""

    @override
    async def execute(self, args: str) -> None:
        # The source is only removed once the copy has completed
        source, _ = await self.copy(args)
        self._logger.info(f"Removing moved file: {source}")
        await self._run_io(self._fs.remove, source)
