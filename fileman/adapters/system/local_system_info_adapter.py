"""
Local OS information adapter.
"""

import getpass
import logging
import os
import platform

from typing_extensions import override

from fileman.entities.cpu_info import CpuInfo
from fileman.ports.system.system_info_port import SystemInfoPort

CPUINFO_PATH = "/proc/cpuinfo"


class LocalSystemInfoAdapter(SystemInfoPort):
    """System information read from the running host via stdlib."""

    def __init__(self, logger: logging.Logger | None = None, cpuinfo_path: str = CPUINFO_PATH):
        self._logger = logger or logging.getLogger(__name__)
        self._cpuinfo_path = cpuinfo_path

    def _read_proc_cpuinfo(self) -> list[CpuInfo]:
        """Parse per-processor model and MHz blocks, Linux only."""
        try:
            with open(self._cpuinfo_path, "r", encoding="utf-8", errors="replace") as f:
                text = f.read()
        except OSError as e:
            self._logger.debug(f"No cpuinfo at {self._cpuinfo_path}: {e}")
            return []

        cpus: list[CpuInfo] = []
        for block in text.split("\n\n"):
            fields: dict[str, str] = {}
            for line in block.splitlines():
                key, sep, value = line.partition(":")
                if sep:
                    fields[key.strip()] = value.strip()
            if "processor" not in fields:
                continue
            try:
                speed = float(fields.get("cpu MHz", "0") or 0)
            except ValueError:
                speed = 0.0
            model = fields.get("model name") or fields.get("Processor") or "unknown"
            cpus.append(CpuInfo(model=model, speed_mhz=speed))
        return cpus

    @override
    def eol(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        cpus = self._read_proc_cpuinfo()
        if cpus:
            return cpus
        model = platform.processor() or platform.machine() or "unknown"
        return [CpuInfo(model=model, speed_mhz=0.0) for _ in range(os.cpu_count() or 1)]

    @override
    def homedir(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()
