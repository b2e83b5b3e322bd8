import asyncio
import io
import os
import signal

import pytest
from rich.console import Console

from batteryindicator.ui import RichStatusItem, TerminalHost


def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=80)


def test_status_item_show_and_dispose_are_idempotent():
    item = RichStatusItem(quiet_console())
    item.text = "42% [||||------]"
    item.color = "#AA3C39"
    item.show()
    item.show()
    assert item._live is not None
    assert item.render().plain == "42% [||||------]"
    assert str(item.render().style) == "#AA3C39"

    item.dispose()
    item.dispose()
    assert item._live is None
    item.show()
    assert item._live is None


def test_status_item_without_color_uses_default_style():
    item = RichStatusItem(quiet_console())
    item.text = "20% [||--------]"
    assert str(item.render().style) == ""


def test_host_creates_status_items_on_its_console():
    host = TerminalHost(quiet_console())
    item = host.create_status_item()
    assert isinstance(item, RichStatusItem)


def test_host_focus_event_reaches_subscribers():
    host = TerminalHost(quiet_console())
    seen = []
    subscription = host.on_did_change_focus(lambda: seen.append(1))
    host.fire_focus_change()
    subscription.dispose()
    host.fire_focus_change()
    assert seen == [1]


@pytest.mark.skipif(not hasattr(signal, "SIGUSR1"), reason="needs POSIX signals")
def test_focus_signal_fires_event_until_disposed():
    async def scenario():
        host = TerminalHost(quiet_console())
        seen = []
        host.on_did_change_focus(lambda: seen.append(1))
        signals = host.watch_focus_signals()
        os.kill(os.getpid(), signal.SIGUSR1)
        for _ in range(50):
            if seen:
                break
            await asyncio.sleep(0.01)
        assert seen == [1]

        signals.dispose()
        signals.dispose()
        loop = asyncio.get_running_loop()
        assert not loop.remove_signal_handler(signal.SIGUSR1)
        assert not loop.remove_signal_handler(signal.SIGWINCH)

    asyncio.run(scenario())
