# batteryindicator/events.py
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)

Listener = Callable[[], Any]


class SupportsDispose(Protocol):
    def dispose(self) -> Any: ...


class Disposable:
    """Releases a resource through a callback, at most once."""

    def __init__(self, on_dispose: Callable[[], Any]):
        self._on_dispose: Optional[Callable[[], Any]] = on_dispose

    @classmethod
    def from_(cls, *disposables: SupportsDispose) -> "Disposable":
        """Combine several disposables into one that disposes them all."""
        items = list(disposables)

        def _dispose_all():
            for item in items:
                item.dispose()

        return cls(_dispose_all)

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        callback, self._on_dispose = self._on_dispose, None
        if callback is not None:
            callback()


# A subscription function, e.g. ``EventEmitter.subscribe``
Event = Callable[[Listener], Disposable]


class EventEmitter:
    """No-argument notifications with disposable subscriptions."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Disposable:
        self._listeners.append(listener)

        def _remove():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Disposable(_remove)

    def fire(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("event listener %r failed", listener)

    def __len__(self) -> int:
        return len(self._listeners)
