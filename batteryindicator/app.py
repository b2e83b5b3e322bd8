# batteryindicator/app.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .config import Config, get_config
from .controller import BatteryIndicatorController
from .events import Disposable, Event
from .indicator import BatteryIndicator
from .sources import BatteryStateSource, get_battery_source
from .ui import StatusItem

logger = logging.getLogger(__name__)


class Host(Protocol):
    on_did_change_focus: Event

    def create_status_item(self) -> StatusItem: ...


@dataclass
class Activation:
    indicator: BatteryIndicator
    controller: BatteryIndicatorController
    subscriptions: Disposable = field(init=False)

    def __post_init__(self):
        self.subscriptions = Disposable.from_(self.controller, self.indicator)

    def dispose(self) -> None:
        self.subscriptions.dispose()


def activate(host: Host, config: Optional[Config] = None, source: Optional[BatteryStateSource] = None) -> Activation:
    """Wire a battery source, indicator and controller to ``host``. Needs a running event loop."""
    cfg = config or get_config()
    src = source or get_battery_source(cfg.source)
    logger.info("battery indicator is now active (source=%s, interval=%sms)",
                type(src).__name__, cfg.polling_interval_ms)
    indicator = BatteryIndicator(src, host.create_status_item, style=cfg.style, interval=cfg.polling_interval_ms)
    controller = BatteryIndicatorController(indicator, host.on_did_change_focus)
    return Activation(indicator=indicator, controller=controller)
