import math

from batteryindicator.config import DEFAULT_COLORS, DEFAULT_STYLE, IndicatorStyle
from batteryindicator.models import PowerColor, PowerReading
from batteryindicator.presentation import format_status, get_power_color, get_visual_indicator, resolve_color


def test_visual_indicator_fills_rounded_tenths():
    for p in range(101):
        for charging in (True, False):
            text = get_visual_indicator(p, charging)
            filled = math.floor(p / 10 + 0.5)
            assert text.startswith("[" + "|" * filled + "-" * (10 - filled) + "]")
            assert (DEFAULT_STYLE.charging_symbol in text) == charging


def test_visual_indicator_edges():
    assert get_visual_indicator(100, False) == "[||||||||||]"
    assert get_visual_indicator(0, False) == "[----------]"
    assert get_visual_indicator(7, True) == "[|---------] ⚡"
    assert get_visual_indicator(69, True).count("|") == 7


def test_visual_indicator_rounds_halves_up():
    for p, filled in {5: 1, 15: 2, 25: 3, 45: 5, 65: 7, 85: 9, 95: 10}.items():
        assert get_visual_indicator(p, False).count("|") == filled


def test_visual_indicator_respects_style():
    style = IndicatorStyle(bar_length=4, full_symbol="#", empty_symbol=".", charging_symbol="+")
    assert get_visual_indicator(50, True, style) == "[##..] +"


def test_power_color_bands():
    assert get_power_color(100) == PowerColor.FULL
    for p in range(80, 100):
        assert get_power_color(p) == PowerColor.HIGH
    for p in range(50, 80):
        assert get_power_color(p) == PowerColor.MEDIUM
    for p in range(30, 50):
        assert get_power_color(p) == PowerColor.LOW
    for p in range(0, 16):
        assert get_power_color(p) == PowerColor.VERY_LOW


def test_power_color_gap_keeps_default():
    for p in range(16, 30):
        assert get_power_color(p) is None
        assert resolve_color(p) is None


def test_format_status():
    reading = PowerReading(percentage=80, is_charging=True)
    assert format_status(reading) == "80% [||||||||--] ⚡"
    assert resolve_color(80) == DEFAULT_COLORS[PowerColor.HIGH]
