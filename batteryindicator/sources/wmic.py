# batteryindicator/sources/wmic.py
from __future__ import annotations

from typing import Dict, Tuple

from ..errors import BatteryUnavailableError
from .commands import run_command

# Win32_Battery.BatteryStatus values meaning external power is attached
CHARGING_STATUSES = {2, 6, 7, 8, 9}


def parse_wmic(output: str) -> Dict[str, str]:
    """
    Parse the first data row of a `wmic ... get A,B` table into {header: value}.

    wmic pads columns with spaces, so values are located by the header's column offset.
    """
    lines = [line.rstrip() for line in output.splitlines() if line.strip()]
    if len(lines) < 2:
        raise BatteryUnavailableError("no battery reported by wmic")
    header, row = lines[0], lines[1]
    names = header.split()
    offsets = [header.index(name) for name in names]
    fields: Dict[str, str] = {}
    for i, name in enumerate(names):
        end = offsets[i + 1] if i + 1 < len(offsets) else None
        fields[name] = row[offsets[i]:end].strip()
    return fields


def parse_battery_fields(fields: Dict[str, str]) -> Tuple[int, bool]:
    try:
        percent = int(fields["EstimatedChargeRemaining"])
        status = int(fields.get("BatteryStatus") or 0)
    except (KeyError, ValueError) as exc:
        raise BatteryUnavailableError(f"unexpected wmic output: {fields}") from exc
    return percent, status in CHARGING_STATUSES


class WmicBatterySource:
    """Windows battery reads via `wmic path Win32_Battery`."""

    command = ("wmic", "path", "Win32_Battery", "get", "BatteryStatus,EstimatedChargeRemaining")

    async def _read(self) -> Tuple[int, bool]:
        return parse_battery_fields(parse_wmic(await run_command(self.command)))

    async def read_battery_level(self) -> int:
        percent, _ = await self._read()
        return percent

    async def read_charging_state(self) -> bool:
        _, charging = await self._read()
        return charging
