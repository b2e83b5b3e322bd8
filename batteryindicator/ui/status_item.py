# batteryindicator/ui/status_item.py
from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.live import Live
from rich.text import Text


class StatusItem(Protocol):
    text: str
    color: Optional[str]

    def show(self) -> None: ...

    def dispose(self) -> None: ...


class RichStatusItem:
    """A single status line kept in place on the terminal with rich's Live display."""

    def __init__(self, console: Console):
        self.text = ""
        self.color: Optional[str] = None
        self._console = console
        self._live: Optional[Live] = None
        self._disposed = False

    def render(self) -> Text:
        return Text(self.text, style=self.color or "")

    def show(self) -> None:
        if self._disposed:
            return
        if self._live is None:
            self._live = Live(self.render(), console=self._console, auto_refresh=False, transient=True)
            self._live.start()
        self._live.update(self.render(), refresh=True)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._live is not None:
            self._live.stop()
            self._live = None
