"""
Dependency injection container wiring the session, ports and command handlers.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from fileman.adapters.codecs.brotli_transforms import (
    BrotliCompressTransform,
    BrotliDecompressTransform,
)
from fileman.adapters.codecs.hash_transform import HashTransform
from fileman.adapters.console.stdin_line_source import StdinLineSource
from fileman.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fileman.adapters.system.local_system_info_adapter import LocalSystemInfoAdapter
from fileman.config.settings import Settings
from fileman.entities.command import CommandName
from fileman.entities.session import Session
from fileman.entities.workdir import Workdir
from fileman.ports.console.line_source_port import LineSourcePort
from fileman.ports.files.file_system_port import FileSystemPort
from fileman.ports.system.system_info_port import SystemInfoPort
from fileman.use_cases.codecs.calculate_hash import CalculateHashUseCase
from fileman.use_cases.codecs.compress_file import TransformFileUseCase
from fileman.use_cases.commands.command_registry import CommandRegistry
from fileman.use_cases.commands.dispatch_command import CommandDispatcher
from fileman.use_cases.files.copy_file import CopyFileUseCase
from fileman.use_cases.files.create_file import CreateFileUseCase
from fileman.use_cases.files.move_file import MoveFileUseCase
from fileman.use_cases.files.read_file import ReadFileUseCase
from fileman.use_cases.files.remove_file import RemoveFileUseCase
from fileman.use_cases.files.rename_file import RenameFileUseCase
from fileman.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from fileman.use_cases.navigation.list_directory import ListDirectoryUseCase
from fileman.use_cases.session.exit_session import ExitSessionUseCase
from fileman.use_cases.session.run_session import SessionLoop
from fileman.use_cases.system.os_info import OsInfoUseCase
from fileman.utils.paths import PathResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    One container holds exactly one session.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        username: Optional[str] = None,
        console: Optional[Console] = None,
        line_source: Optional[LineSourcePort] = None,
    ):
        self._settings = settings
        self._username = username
        self._instances: dict[str, Any] = {}
        if console is not None:
            self._instances["console"] = console
        if line_source is not None:
            self._instances["line_source"] = line_source
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> Console:
        if "console" not in self._instances:
            self._instances["console"] = Console(highlight=False, soft_wrap=True)
        return self._instances["console"]

    def get_line_source(self) -> LineSourcePort:
        if "line_source" not in self._instances:
            self._instances["line_source"] = StdinLineSource(logger=self._logger)
        return self._instances["line_source"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_system_info(self) -> SystemInfoPort:
        if "system_info" not in self._instances:
            self._instances["system_info"] = LocalSystemInfoAdapter(self._logger)
        return self._instances["system_info"]

    def get_session(self) -> Session:
        """
        Get the session, creating its workdir at the configured start directory.

        Returns:
            The single Session of this container
        """
        if "session" not in self._instances:
            username = self._username or self.settings.username
            workdir = Workdir(self.settings.start_dir)
            self._instances["session"] = Session(username, workdir)
        return self._instances["session"]

    def get_path_resolver(self) -> PathResolver:
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(self.get_session().workdir)
        return self._instances["path_resolver"]

    def get_command_registry(self) -> CommandRegistry:
        """
        Build the frozen registry of all commands.

        Returns:
            CommandRegistry with every built-in command registered
        """
        if "command_registry" in self._instances:
            return self._instances["command_registry"]

        session = self.get_session()
        fs = self.get_file_system()
        resolver = self.get_path_resolver()
        console = self.get_console()
        chunk_size = self.settings.chunk_size
        file_args = dict(logger=self._logger, chunk_size=chunk_size)

        cd = ChangeDirectoryUseCase(session.workdir, fs, resolver, self._logger)
        registry = CommandRegistry()
        registry.register(CommandName.EXIT, ExitSessionUseCase(session))
        registry.register(CommandName.UP, GoUpUseCase(cd))
        registry.register(CommandName.CD, cd)
        registry.register(
            CommandName.LS, ListDirectoryUseCase(session.workdir, fs, console, self._logger)
        )
        registry.register(CommandName.CAT, ReadFileUseCase(fs, resolver, **file_args))
        registry.register(CommandName.ADD, CreateFileUseCase(fs, resolver, **file_args))
        registry.register(CommandName.RN, RenameFileUseCase(fs, resolver, **file_args))
        registry.register(CommandName.CP, CopyFileUseCase(fs, resolver, **file_args))
        registry.register(CommandName.MV, MoveFileUseCase(fs, resolver, **file_args))
        registry.register(CommandName.RM, RemoveFileUseCase(fs, resolver, **file_args))
        registry.register(
            CommandName.OS, OsInfoUseCase(self.get_system_info(), console, self._logger)
        )
        registry.register(
            CommandName.HASH,
            CalculateHashUseCase(fs, resolver, HashTransform, console, **file_args),
        )
        registry.register(
            CommandName.COMPRESS,
            TransformFileUseCase(
                fs, resolver, BrotliCompressTransform, console, "compress", **file_args
            ),
        )
        registry.register(
            CommandName.DECOMPRESS,
            TransformFileUseCase(
                fs, resolver, BrotliDecompressTransform, console, "decompress", **file_args
            ),
        )
        self._instances["command_registry"] = registry.freeze()
        return registry

    def get_dispatcher(self) -> CommandDispatcher:
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                self.get_command_registry(), self._logger
            )
        return self._instances["dispatcher"]

    def get_session_loop(self) -> SessionLoop:
        if "session_loop" not in self._instances:
            self._instances["session_loop"] = SessionLoop(
                self.get_session(),
                self.get_dispatcher(),
                self.get_line_source(),
                self.get_console(),
                self._logger,
            )
        return self._instances["session_loop"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
