"""
Use case for listing the working directory (``ls``).
"""

import asyncio
import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import override

from fileman.entities.dir_entry import DirEntry
from fileman.entities.workdir import Workdir
from fileman.exceptions import FileManagerError, OperationFailedError
from fileman.ports.commands.command_handler_port import CommandHandlerPort
from fileman.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase(CommandHandlerPort):
    """List the workdir: directories first, each group sorted by name."""

    def __init__(
        self,
        workdir: Workdir,
        file_system: FileSystemPort,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._workdir = workdir
        self._fs = file_system
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def list_entries(self) -> list[DirEntry]:
        """
        Return the sorted immediate entries of the workdir.

        Raises:
            OperationFailedError: If the directory cannot be listed
        """
        directory = self._workdir.get()
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = sorted(self._fs.list_dir(directory), key=DirEntry.sort_key)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileManagerError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise OperationFailedError(e) from e

    def render(self, entries: list[DirEntry]) -> Table:
        table = Table(box=box.SIMPLE_HEAVY)
        table.add_column("(index)", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        for index, entry in enumerate(entries):
            table.add_row(str(index), Text(entry.name), entry.kind)
        return table

    @override
    async def execute(self, args: str) -> None:
        # Arguments are ignored
        entries = await asyncio.to_thread(self.list_entries)
        self._console.print(self.render(entries))
