from .status_item import RichStatusItem, StatusItem
from .terminal import TerminalHost

__all__ = ["RichStatusItem", "StatusItem", "TerminalHost"]
