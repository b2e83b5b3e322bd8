from .base import BatteryStateSource, CallableBatterySource, read_power
from .pmset import PmsetBatterySource
from .psutil_source import PsutilBatterySource
from .wmic import WmicBatterySource

SOURCES = {
    "psutil": PsutilBatterySource,
    "pmset": PmsetBatterySource,
    "wmic": WmicBatterySource,
}


def get_battery_source(kind: str = "auto") -> BatteryStateSource:
    """Return the battery source for ``kind``; ``auto`` uses psutil, which covers every platform."""
    if kind == "auto":
        kind = "psutil"
    try:
        return SOURCES[kind]()
    except KeyError:
        raise ValueError(f"Unknown battery source: {kind}") from None


__all__ = [
    "BatteryStateSource",
    "CallableBatterySource",
    "PmsetBatterySource",
    "PsutilBatterySource",
    "WmicBatterySource",
    "SOURCES",
    "get_battery_source",
    "read_power",
]
