# batteryindicator/models.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidReadingError


class PowerColor(str, Enum):
    """Color tokens for the five charge bands."""
    FULL = "full"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    VERY_LOW = "veryLow"


@dataclass(frozen=True)
class PowerReading:
    percentage: int
    is_charging: bool

    @classmethod
    def from_values(cls, level: Any, charging: Any) -> "PowerReading":
        """Build a reading from raw source values; raise InvalidReadingError if the level is unusable."""
        if level is None or isinstance(level, bool) or not isinstance(level, (int, float)):
            raise InvalidReadingError(f"invalid value: {level!r}")
        if not math.isfinite(level) or not 0 <= level <= 100:
            raise InvalidReadingError(f"invalid value: {level!r}")
        return cls(percentage=int(round(level)), is_charging=bool(charging))
