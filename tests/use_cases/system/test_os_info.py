"""
Tests for the os use case.
"""

from unittest.mock import MagicMock

import pytest

from fileman.entities.cpu_info import CpuInfo
from fileman.exceptions import InvalidInputError, OperationFailedError
from fileman.ports.system.system_info_port import SystemInfoPort
from fileman.use_cases.system.os_info import OsInfoUseCase


@pytest.fixture
def system_info():
    info = MagicMock(spec=SystemInfoPort)
    info.eol.return_value = "\n"
    info.cpus.return_value = [CpuInfo("Fast CPU", 3000.0), CpuInfo("Fast CPU", 3000.0)]
    info.homedir.return_value = "/home/alice"
    info.username.return_value = "alice"
    info.architecture.return_value = "x86_64"
    return info


class TestOsInfoUseCase:
    """Test cases for the OsInfoUseCase."""

    def test_eol_is_json_quoted(self, system_info, console, mock_logger):
        OsInfoUseCase(system_info, console, mock_logger).execute("--EOL")

        assert console.file.getvalue().strip() == '"\\n"'

    def test_cpus(self, system_info, console, mock_logger):
        OsInfoUseCase(system_info, console, mock_logger).execute("--cpus")

        output = console.file.getvalue()
        assert "amount of CPUS: 2" in output
        assert output.count("Fast CPU") == 2
        assert "3.0" in output

    @pytest.mark.parametrize(
        "flag, expected",
        [("--homedir", "/home/alice"), ("--username", "alice"), ("--architecture", "x86_64")],
    )
    def test_single_values(self, system_info, console, mock_logger, flag, expected):
        OsInfoUseCase(system_info, console, mock_logger).execute(f" {flag} ")

        assert console.file.getvalue().strip() == expected

    @pytest.mark.parametrize("flag", ["", "--eol", "--memory", "cpus"])
    def test_unknown_flag(self, system_info, console, mock_logger, flag):
        with pytest.raises(InvalidInputError):
            OsInfoUseCase(system_info, console, mock_logger).execute(flag)

        assert console.file.getvalue() == ""

    def test_provider_failure_is_wrapped(self, system_info, console, mock_logger):
        system_info.username.side_effect = KeyError("no passwd entry")

        with pytest.raises(OperationFailedError):
            OsInfoUseCase(system_info, console, mock_logger).execute("--username")
