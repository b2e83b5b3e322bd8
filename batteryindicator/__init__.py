from .controller import BatteryIndicatorController
from .indicator import BatteryIndicator
from .models import PowerColor, PowerReading

__version__ = "0.1.0"

__all__ = ["BatteryIndicator", "BatteryIndicatorController", "PowerColor", "PowerReading"]
