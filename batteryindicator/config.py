# batteryindicator/config.py
"""Configuration management for the battery indicator"""

from pathlib import Path
from typing import Dict, Optional, Literal
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import PowerColor

DEFAULT_POLLING_INTERVAL_MS = 30000
MIN_POLLING_INTERVAL_MS = 1

DEFAULT_COLORS: Dict[PowerColor, str] = {
    PowerColor.FULL: "#2D8633",
    PowerColor.HIGH: "#54A759",
    PowerColor.MEDIUM: "#AA9739",
    PowerColor.LOW: "#AA3C39",
    PowerColor.VERY_LOW: "#801815",
}

CONFIG_PATH = Path.home() / ".batteryindicator" / "config.yaml"


class IndicatorStyle(BaseModel):
    """Presentation constants for the status line"""
    model_config = ConfigDict(frozen=True)

    bar_length: int = Field(10, ge=1)
    full_symbol: str = "|"
    empty_symbol: str = "-"
    charging_symbol: str = "⚡"
    colors: Dict[PowerColor, str] = Field(default_factory=lambda: dict(DEFAULT_COLORS))


DEFAULT_STYLE = IndicatorStyle()


class Config(BaseSettings):
    """Main battery indicator configuration"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BATTERYINDICATOR_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    polling_interval_ms: int = DEFAULT_POLLING_INTERVAL_MS
    source: Literal["auto", "psutil", "pmset", "wmic"] = "auto"
    debug: bool = False
    style: IndicatorStyle = Field(default_factory=IndicatorStyle)

    @field_validator("polling_interval_ms")
    @classmethod
    def _clamp_interval(cls, value: int) -> int:
        return max(value, MIN_POLLING_INTERVAL_MS)


_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file"""
    if path is None:
        path = CONFIG_PATH

    if not path.exists():
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Only the polling interval is ever persisted
    config_data = {}
    if "polling_interval_ms" in data:
        config_data["polling_interval_ms"] = int(data["polling_interval_ms"])
    return Config(**config_data)


def save_config(config: Config, path: Optional[Path] = None):
    """Save the polling interval to YAML file"""
    if path is None:
        path = CONFIG_PATH

    path.parent.mkdir(parents=True, exist_ok=True)

    data = {"polling_interval_ms": config.polling_interval_ms}

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
