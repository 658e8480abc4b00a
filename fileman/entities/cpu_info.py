"""
CPU description entity.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CpuInfo:
    model: str
    speed_mhz: float

    @property
    def clock_ghz(self) -> float:
        return round(self.speed_mhz / 1000, 2)

    def get_details(self) -> dict[str, Any]:
        return {"model": self.model, "clock_GHz": self.clock_ghz}
