"""EaseValueMultiple - several named EaseValues reported as one animation."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from ease_value.events import Emitter, Listener
from ease_value.scheduler import FrameScheduler, get_default_loop
from ease_value.value import EaseValue

logger = logging.getLogger(__name__)


class EaseValueMultiple:
    """Aggregates named EaseValues into one start/step/stop stream.

    Child events are coalesced: at most one aggregate event of each kind is
    emitted per frame, carrying a ``{name: value}`` snapshot taken when the
    event fires. Children are reachable as attributes (``multi.x``).

    A child whose step raises goes idle without emitting ``stop``; the group
    notices on its next aggregate step and emits its own ``stop`` after it.
    """

    def __init__(
        self,
        ease_values: Mapping[str, EaseValue],
        scheduler: FrameScheduler | None = None,
    ) -> None:
        self.ease_values: dict[str, EaseValue] = dict(ease_values)
        self.keys: tuple[str, ...] = tuple(self.ease_values)
        self._scheduler: FrameScheduler = (
            scheduler if scheduler is not None else get_default_loop()
        )
        self._events = Emitter()
        self._value = self.get_value()
        self._is_running = self.get_is_running()
        self._req_start: int | None = None
        self._req_stop: int | None = None
        self._req_step: int | None = None

        for ease_value in self.ease_values.values():
            ease_value.on("start", self._handle_start)
            ease_value.on("stop", self._handle_stop)
            ease_value.on("step", self._handle_step)

    def __getattr__(self, name: str) -> EaseValue:
        ease_values = self.__dict__.get("ease_values", {})
        try:
            return ease_values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    @property
    def value(self) -> dict[str, Any]:
        return dict(self._value)

    @property
    def is_running(self) -> bool:
        return self._is_running

    def on(self, event_name: str, callback: Listener) -> None:
        self._events.on(event_name, callback)

    def off(self, event_name: str, callback: Listener) -> None:
        self._events.off(event_name, callback)

    def to(self, values: Mapping[str, float]) -> None:
        for name in self.keys:
            if name in values:
                self.ease_values[name].to(values[name])

    def reset(self, values: Mapping[str, float]) -> None:
        for name in self.keys:
            if name in values:
                self.ease_values[name].reset(values[name])

    def get_value(self) -> dict[str, Any]:
        return {name: self.ease_values[name].value for name in self.keys}

    def get_is_running(self) -> bool:
        return any(self.ease_values[name].is_running for name in self.keys)

    def destroy(self) -> None:
        for token in (self._req_start, self._req_stop, self._req_step):
            if token is not None:
                self._scheduler.cancel(token)
        self._req_start = self._req_stop = self._req_step = None

        for ease_value in self.ease_values.values():
            ease_value.destroy()

        self.ease_values = {}
        self.keys = ()
        self._value = {}
        self._is_running = False
        self._events.clear()

    # Child event handlers

    def _handle_start(self, _value: Any) -> None:
        self._value = self.get_value()
        if self._is_running:
            return

        # The child flags itself running only on its first step.
        self._is_running = True

        if self._req_stop is not None:
            # Went idle and restarted within one frame: observers never
            # see the gap.
            self._scheduler.cancel(self._req_stop)
            self._req_stop = None
            return

        if self._req_start is None:
            self._req_start = self._scheduler.schedule(self._trigger_start)

    def _handle_stop(self, _value: Any) -> None:
        self._is_running = self.get_is_running()

        if not self._is_running:
            if self._req_stop is not None:
                self._scheduler.cancel(self._req_stop)
            self._value = self.get_value()
            self._req_stop = self._scheduler.schedule(self._trigger_stop)

    def _handle_step(self, _value: Any) -> None:
        self._value = self.get_value()

        if self._req_step is None:
            self._req_step = self._scheduler.schedule(self._trigger_step)

    # Coalesced emitters

    def _trigger_start(self) -> None:
        self._req_start = None
        self._value = self.get_value()
        logger.debug(f"Group started: {self._value}")
        self._events.trigger("start", dict(self._value))

    def _trigger_step(self) -> None:
        self._req_step = None
        self._value = self.get_value()
        self._events.trigger("step", dict(self._value))
        if self._is_running and not self.get_is_running():
            # A child whose step raised goes idle without a stop.
            self._handle_stop(None)

    def _trigger_stop(self) -> None:
        self._req_stop = None
        self._value = self.get_value()
        logger.debug(f"Group stopped: {self._value}")
        self._events.trigger("stop", dict(self._value))

    def __repr__(self) -> str:
        return f"EaseValueMultiple({self._value!r}, running={self._is_running})"


def multiple(
    ease_values: Mapping[str, EaseValue],
    scheduler: FrameScheduler | None = None,
) -> EaseValueMultiple:
    """Group ``ease_values`` into an EaseValueMultiple."""
    return EaseValueMultiple(ease_values, scheduler=scheduler)
