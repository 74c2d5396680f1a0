"""Ordered named-callback registry shared by the easing engines."""
from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class Emitter:

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event_name: str, callback: Listener) -> None:
        """Register a listener. Non-callables are ignored."""
        if not callable(callback):
            return
        self._listeners.setdefault(event_name, []).append(callback)

    def off(self, event_name: str, callback: Listener) -> None:
        callbacks = self._listeners.get(event_name)
        if callbacks is None:
            return
        try:
            callbacks.remove(callback)
        except ValueError:
            pass

    def trigger(self, event_name: str, value: Any = None) -> None:
        # Copy so listeners may unsubscribe themselves mid-dispatch.
        for callback in list(self._listeners.get(event_name, [])):
            callback(value)

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def clear(self) -> None:
        self._listeners.clear()
