# batteryindicator/ui/terminal.py
from __future__ import annotations

import asyncio
import logging
import signal
from typing import List, Optional

from rich.console import Console

from ..events import Disposable, Event, EventEmitter
from .status_item import RichStatusItem

logger = logging.getLogger(__name__)


class TerminalHost:
    """
    Hosts the indicator in a terminal.

    Status items render through rich. Focus changes are signalled to the process:
    SIGWINCH when the terminal is resized or re-attached, SIGUSR1 on request
    (e.g. from a window manager hook running `pkill -USR1 batteryindicator`).
    """

    FOCUS_SIGNALS = ("SIGWINCH", "SIGUSR1")

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._focus = EventEmitter()

    @property
    def on_did_change_focus(self) -> Event:
        return self._focus.subscribe

    def create_status_item(self) -> RichStatusItem:
        return RichStatusItem(self.console)

    def fire_focus_change(self) -> None:
        self._focus.fire()

    def watch_focus_signals(self) -> Disposable:
        """Install signal handlers on the running loop; the returned disposable removes them."""
        loop = asyncio.get_running_loop()
        installed: List[signal.Signals] = []
        for name in self.FOCUS_SIGNALS:
            sig = getattr(signal, name, None)
            if sig is None:
                continue
            try:
                loop.add_signal_handler(sig, self.fire_focus_change)
            except (NotImplementedError, RuntimeError):
                # Windows event loops have no signal handler support
                logger.debug("cannot watch %s on this platform", name)
                continue
            installed.append(sig)

        def _remove():
            for sig in installed:
                loop.remove_signal_handler(sig)

        return Disposable(_remove)
