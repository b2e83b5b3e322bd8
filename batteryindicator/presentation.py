# batteryindicator/presentation.py
"""Bar glyph and color band rendering for a power reading."""
from __future__ import annotations

import math
from typing import Optional

from .config import DEFAULT_STYLE, IndicatorStyle
from .models import PowerColor, PowerReading


def get_visual_indicator(percentage: float, is_charging: bool, style: IndicatorStyle = DEFAULT_STYLE) -> str:
    """Render e.g. ``[||||||||--] ⚡`` for 80% while charging."""
    # halves round up: 5% fills one section
    filled = math.floor(percentage * style.bar_length / 100 + 0.5)
    filled = min(max(filled, 0), style.bar_length)
    bar = (style.full_symbol * filled).ljust(style.bar_length, style.empty_symbol)
    suffix = f" {style.charging_symbol}" if is_charging else ""
    return f"[{bar}]{suffix}"


def get_power_color(percentage: float) -> Optional[PowerColor]:
    # 16..29 falls through every band and keeps the host's default color
    if percentage == 100:
        return PowerColor.FULL
    elif percentage >= 80:
        return PowerColor.HIGH
    elif percentage >= 50:
        return PowerColor.MEDIUM
    elif percentage >= 30:
        return PowerColor.LOW
    elif percentage <= 15:
        return PowerColor.VERY_LOW
    return None


def format_status(reading: PowerReading, style: IndicatorStyle = DEFAULT_STYLE) -> str:
    return f"{reading.percentage}% {get_visual_indicator(reading.percentage, reading.is_charging, style)}"


def resolve_color(percentage: float, style: IndicatorStyle = DEFAULT_STYLE) -> Optional[str]:
    """Map a percentage to the style's concrete color, or None for no recolor."""
    token = get_power_color(percentage)
    if token is None:
        return None
    return style.colors.get(token)
