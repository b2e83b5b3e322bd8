# batteryindicator/indicator.py
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Set

from .config import DEFAULT_POLLING_INTERVAL_MS, DEFAULT_STYLE, MIN_POLLING_INTERVAL_MS, IndicatorStyle
from .errors import BatteryUnavailableError, InvalidReadingError
from .models import PowerColor, PowerReading
from .presentation import format_status, get_power_color, get_visual_indicator, resolve_color
from .sources import BatteryStateSource, read_power
from .ui import StatusItem

logger = logging.getLogger(__name__)


class BatteryIndicator:
    """
    Keeps one status item showing the battery level, refreshed on a timer and on demand.

    Must be constructed inside a running event loop: construction schedules an
    immediate refresh and starts polling. A failed read means the host has no
    battery; the indicator then stops polling, releases its item and ignores
    any further refresh.
    """

    def __init__(
        self,
        source: BatteryStateSource,
        create_status_item: Callable[[], StatusItem],
        style: IndicatorStyle = DEFAULT_STYLE,
        interval: int = DEFAULT_POLLING_INTERVAL_MS,
    ):
        self.style = style
        self.last_reading: Optional[PowerReading] = None
        self.timer: Optional[asyncio.Task] = None
        self.battery_absent = False
        self.disposed = False
        self._source = source
        self._create_status_item = create_status_item
        self._status_item: Optional[StatusItem] = None
        self._interval = DEFAULT_POLLING_INTERVAL_MS
        self._refreshes: Set[asyncio.Task] = set()
        self._poll_refresh: Optional[asyncio.Task] = None
        self._closed = asyncio.Event()

        self.initial_refresh = self.refresh()
        self.interval = interval

    # ---------- Polling ----------

    @property
    def interval(self) -> int:
        """Polling interval in milliseconds."""
        return self._interval

    @interval.setter
    def interval(self, value: int) -> None:
        self._interval = max(int(value), MIN_POLLING_INTERVAL_MS)
        if not self.closed:
            self.start_polling()

    def start_polling(self) -> None:
        self.stop_polling()
        interval = self._interval

        async def _loop():
            while True:
                await asyncio.sleep(interval / 1000)
                # skip the tick while the previous timed refresh is still reading
                if self._poll_refresh is None or self._poll_refresh.done():
                    self._poll_refresh = self.refresh()

        self.timer = asyncio.create_task(_loop())

    def stop_polling(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None

    # ---------- Refresh ----------

    @property
    def closed(self) -> bool:
        return self.disposed or self.battery_absent

    @property
    def status_item(self) -> Optional[StatusItem]:
        return self._status_item

    def refresh(self) -> asyncio.Task:
        """Schedule update_status() without waiting for it."""
        task = asyncio.create_task(self.update_status())
        self._refreshes.add(task)
        task.add_done_callback(self._refreshes.discard)
        return task

    async def update_status(self) -> Optional[PowerReading]:
        if self.closed:
            return None
        logger.debug("battery indicator updating")
        if self._status_item is None:
            self._status_item = self._create_status_item()

        try:
            reading = await read_power(self._source)
        except InvalidReadingError as exc:
            if not self.closed:
                logger.warning("battery indicator: %s", exc)
                self._status_item.show()
            return None
        except BatteryUnavailableError as exc:
            if not self.closed:
                logger.info("no battery found, stopping battery indicator: %s", exc)
                self.battery_absent = True
                self._release()
            return None

        # Disposed while the reads were in flight
        if self.closed:
            return None

        self.last_reading = reading
        self._status_item.text = format_status(reading, self.style)
        self._status_item.color = resolve_color(reading.percentage, self.style)
        self._status_item.show()
        return reading

    # ---------- Presentation ----------

    def get_visual_indicator(self, percentage: float, is_charging: bool) -> str:
        return get_visual_indicator(percentage, is_charging, self.style)

    def get_power_color(self, percentage: float) -> Optional[PowerColor]:
        return get_power_color(percentage)

    # ---------- Lifecycle ----------

    async def wait_closed(self) -> None:
        """Wait until the indicator is disposed or finds no battery."""
        await self._closed.wait()

    def dispose(self) -> None:
        if not self.disposed:
            logger.info("battery indicator disposed")
        self.disposed = True
        self._release()

    def _release(self) -> None:
        self.stop_polling()
        if self._status_item is not None:
            self._status_item.dispose()
            self._status_item = None
        self._closed.set()
