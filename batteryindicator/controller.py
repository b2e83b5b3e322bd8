# batteryindicator/controller.py
from __future__ import annotations

from typing import List

from .events import Disposable, Event
from .indicator import BatteryIndicator


class BatteryIndicatorController:
    """Refreshes the indicator whenever the host reports a focus change."""

    def __init__(self, indicator: BatteryIndicator, on_did_change_focus: Event):
        self._indicator = indicator
        self._indicator.refresh()

        subscriptions: List[Disposable] = [on_did_change_focus(self._on_event)]
        self._disposable = Disposable.from_(*subscriptions)

    @property
    def disposed(self) -> bool:
        return self._disposable.disposed

    def dispose(self) -> None:
        self._disposable.dispose()

    def _on_event(self) -> None:
        self._indicator.refresh()
