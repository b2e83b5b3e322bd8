# batteryindicator/sources/base.py
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Protocol

from ..errors import BatteryUnavailableError
from ..models import PowerReading


class BatteryStateSource(Protocol):
    async def read_battery_level(self) -> float: ...

    async def read_charging_state(self) -> bool: ...


class CallableBatterySource:
    """Adapts a pair of async callables to the BatteryStateSource interface."""

    def __init__(self, read_level: Callable[[], Awaitable[float]], read_charging: Callable[[], Awaitable[bool]]):
        self._read_level = read_level
        self._read_charging = read_charging

    async def read_battery_level(self) -> float:
        return await self._read_level()

    async def read_charging_state(self) -> bool:
        return await self._read_charging()


async def read_power(source: BatteryStateSource) -> PowerReading:
    """
    Run both reads concurrently and join them.

    Raises BatteryUnavailableError if either read fails, or InvalidReadingError if
    both succeed but the level is not a usable percentage.
    """
    level, charging = await asyncio.gather(
        source.read_battery_level(),
        source.read_charging_state(),
        return_exceptions=True,
    )
    for result in (level, charging):
        if isinstance(result, BatteryUnavailableError):
            raise result
        if isinstance(result, Exception):
            raise BatteryUnavailableError(str(result) or type(result).__name__) from result
    return PowerReading.from_values(level, charging)
