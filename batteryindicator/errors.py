# batteryindicator/errors.py
from __future__ import annotations


class BatteryIndicatorError(Exception):
    """Base class for battery indicator errors."""


class BatteryUnavailableError(BatteryIndicatorError):
    """
    Raised by a battery source when the host has no battery or the platform query fails.

    The indicator treats this as permanent for the lifetime of the process.
    """


class InvalidReadingError(BatteryIndicatorError, ValueError):
    """Raised when a poll succeeds but yields a missing or out-of-range percentage."""
