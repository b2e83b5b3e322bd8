# batteryindicator/sources/pmset.py
from __future__ import annotations

import re
from typing import Tuple

from ..errors import BatteryUnavailableError
from .commands import run_command

_BATT_RE = re.compile(r"(\d+)%;\s*(charging|discharging|charged|finishing charge|AC attached)")


def parse_pmset(output: str) -> Tuple[int, bool]:
    """
    Parse `pmset -g batt` output into (percent, is_charging).

    Format e.g. " -InternalBattery-0 (id=4653155)	87%; charging; 1:02 remaining present: true".
    A desktop Mac prints no battery line at all.
    """
    match = _BATT_RE.search(output)
    if not match:
        raise BatteryUnavailableError("no battery reported by pmset")
    return int(match.group(1)), match.group(2) in ("charging", "finishing charge")


class PmsetBatterySource:
    """macOS battery reads via `pmset -g batt`."""

    command = ("pmset", "-g", "batt")

    async def read_battery_level(self) -> int:
        percent, _ = parse_pmset(await run_command(self.command))
        return percent

    async def read_charging_state(self) -> bool:
        _, charging = parse_pmset(await run_command(self.command))
        return charging
