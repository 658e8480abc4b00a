"""
Port for read-only operating system metadata.
"""

from abc import ABC, abstractmethod

from fileman.entities.cpu_info import CpuInfo


class SystemInfoPort(ABC):
    """Port interface for OS information queries."""

    @abstractmethod
    def eol(self) -> str:
        """Return the platform line separator."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """Return one CpuInfo per logical CPU."""
        pass

    @abstractmethod
    def homedir(self) -> str:
        """Return the current user's home directory."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Return the OS account name of the current user."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """Return the machine architecture name."""
        pass
