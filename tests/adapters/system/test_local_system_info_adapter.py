"""
Tests for the LocalSystemInfoAdapter.
"""

import os

from fileman.adapters.system.local_system_info_adapter import LocalSystemInfoAdapter
from fileman.entities.cpu_info import CpuInfo

CPUINFO = """processor\t: 0
model name\t: Test CPU @ 2.40GHz
cpu MHz\t\t: 2400.000

processor\t: 1
model name\t: Test CPU @ 2.40GHz
cpu MHz\t\t: 1200.500
"""


class TestLocalSystemInfoAdapter:
    """Test cases for the LocalSystemInfoAdapter."""

    def test_cpus_from_proc_cpuinfo(self, tmp_path, mock_logger):
        """Test parsing of per-processor blocks."""
        cpuinfo = tmp_path / "cpuinfo"
        cpuinfo.write_text(CPUINFO)
        adapter = LocalSystemInfoAdapter(mock_logger, cpuinfo_path=str(cpuinfo))

        cpus = adapter.cpus()

        assert cpus == [
            CpuInfo("Test CPU @ 2.40GHz", 2400.0),
            CpuInfo("Test CPU @ 2.40GHz", 1200.5),
        ]
        assert cpus[1].clock_ghz == 1.2

    def test_cpus_fallback_without_cpuinfo(self, tmp_path, mock_logger):
        """Test that one entry per logical CPU is returned when /proc is missing."""
        adapter = LocalSystemInfoAdapter(mock_logger, cpuinfo_path=str(tmp_path / "missing"))

        cpus = adapter.cpus()

        assert len(cpus) == (os.cpu_count() or 1)
        assert all(cpu.speed_mhz == 0.0 for cpu in cpus)

    def test_simple_values(self, mock_logger):
        adapter = LocalSystemInfoAdapter(mock_logger)

        assert adapter.eol() == os.linesep
        assert adapter.homedir() == os.path.expanduser("~")
        assert adapter.architecture()
