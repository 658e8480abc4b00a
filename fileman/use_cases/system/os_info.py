"""
Use case for printing operating system information (``os``).
"""

import json
import logging
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import override

from fileman.exceptions import FileManagerError, InvalidInputError, OperationFailedError
from fileman.ports.commands.command_handler_port import CommandHandlerPort
from fileman.ports.system.system_info_port import SystemInfoPort


class OsInfoUseCase(CommandHandlerPort):
    """Print one piece of OS metadata selected by a ``--flag``."""

    def __init__(
        self,
        system_info: SystemInfoPort,
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self._system_info = system_info
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._subcommands: dict[str, Callable[[], None]] = {
            "--EOL": self._show_eol,
            "--cpus": self._show_cpus,
            "--homedir": self._show_homedir,
            "--username": self._show_username,
            "--architecture": self._show_architecture,
        }

    def _print(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False)

    def _show_eol(self) -> None:
        self._print(json.dumps(self._system_info.eol()))

    def _show_cpus(self) -> None:
        cpus = self._system_info.cpus()
        self._print(f"amount of CPUS: {len(cpus)}")
        table = Table(box=box.SIMPLE_HEAVY)
        table.add_column("(index)", justify="right", style="dim")
        table.add_column("model")
        table.add_column("clock_GHz", justify="right")
        for index, cpu in enumerate(cpus):
            details = cpu.get_details()
            table.add_row(str(index), Text(details["model"]), str(details["clock_GHz"]))
        self._console.print(table)

    def _show_homedir(self) -> None:
        self._print(self._system_info.homedir())

    def _show_username(self) -> None:
        self._print(self._system_info.username())

    def _show_architecture(self) -> None:
        self._print(self._system_info.architecture())

    @override
    def execute(self, args: str) -> None:
        flag = args.strip()
        action = self._subcommands.get(flag)
        if action is None:
            raise InvalidInputError(f"unknown os option '{flag}'" if flag else None)
        try:
            self._logger.info(f"Showing OS info: {flag}")
            action()
        except FileManagerError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading OS info: {e}")
            raise OperationFailedError(e) from e
