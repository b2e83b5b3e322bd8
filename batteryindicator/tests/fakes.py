from __future__ import annotations

import asyncio
from typing import List, Optional

from batteryindicator.errors import BatteryUnavailableError
from batteryindicator.events import EventEmitter


class FakeStatusItem:
    def __init__(self):
        self.text = ""
        self.color: Optional[str] = None
        self.show_count = 0
        self.dispose_count = 0

    @property
    def visible(self) -> bool:
        return self.show_count > 0 and self.dispose_count == 0

    def show(self):
        self.show_count += 1

    def dispose(self):
        self.dispose_count += 1


class FakeHost:
    def __init__(self):
        self.items: List[FakeStatusItem] = []
        self.focus = EventEmitter()

    @property
    def on_did_change_focus(self):
        return self.focus.subscribe

    def create_status_item(self) -> FakeStatusItem:
        item = FakeStatusItem()
        self.items.append(item)
        return item


class FakeSource:
    """Battery source returning fixed values and counting reads."""

    def __init__(self, level=80, charging=True, fail_level=False, fail_charging=False):
        self.level = level
        self.charging = charging
        self.fail_level = fail_level
        self.fail_charging = fail_charging
        self.level_reads = 0
        self.gate: Optional[asyncio.Event] = None

    async def read_battery_level(self):
        self.level_reads += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_level:
            raise BatteryUnavailableError("no battery")
        return self.level

    async def read_charging_state(self):
        if self.fail_charging:
            raise RuntimeError("query failed")
        return self.charging
