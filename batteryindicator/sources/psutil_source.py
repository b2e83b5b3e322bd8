# batteryindicator/sources/psutil_source.py
from __future__ import annotations

import asyncio

import psutil

from ..errors import BatteryUnavailableError


class PsutilBatterySource:
    """Cross-platform battery reads via psutil.sensors_battery()."""

    async def _sensors_battery(self):
        if not hasattr(psutil, "sensors_battery"):
            raise BatteryUnavailableError("platform not supported")
        batt = await asyncio.to_thread(psutil.sensors_battery)
        if batt is None:
            raise BatteryUnavailableError("no battery is installed")
        return batt

    async def read_battery_level(self) -> float:
        batt = await self._sensors_battery()
        return float(batt.percent)

    async def read_charging_state(self) -> bool:
        batt = await self._sensors_battery()
        # power_plugged is None when it cannot be determined
        return bool(batt.power_plugged) and batt.percent < 100
