"""
Use cases for moving the virtual working directory (``cd`` and ``up``).
"""

import logging
from typing import Optional

from typing_extensions import override

from fileman.entities.workdir import Workdir
from fileman.exceptions import InvalidInputError, OperationFailedError
from fileman.ports.commands.command_handler_port import CommandHandlerPort
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.utils.paths import PathResolver


class ChangeDirectoryUseCase(CommandHandlerPort):
    """Move the workdir to an existing directory."""

    def __init__(
        self,
        workdir: Workdir,
        file_system: FileSystemPort,
        resolver: PathResolver,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            workdir: The session's virtual working directory
            file_system: Port used for the directory check
            resolver: Resolver bound to the same workdir
            logger: Logger instance to use for logging
        """
        self._workdir = workdir
        self._fs = file_system
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, args: str) -> None:
        """
        Change to the directory named by ``args``.

        Raises:
            InvalidInputError: If no path is given
            OperationFailedError: If the target is missing or not a directory
        """
        target = args.strip()
        if not target:
            raise InvalidInputError()
        path = self._resolver.resolve(target)
        if not self._fs.is_dir(path):
            self._logger.warning(f"Not a directory: {path}")
            raise OperationFailedError(NotADirectoryError(path))
        self._logger.info(f"Changing directory to: {path}")
        self._workdir.set(path)


class GoUpUseCase(CommandHandlerPort):
    """Move the workdir to its parent; a no-op at a filesystem root."""

    def __init__(self, change_directory_uc: ChangeDirectoryUseCase):
        self._change_directory_uc = change_directory_uc

    @override
    def execute(self, args: str) -> None:
        # Arguments are ignored
        self._change_directory_uc.execute("..")
