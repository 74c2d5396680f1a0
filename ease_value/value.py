"""EaseValue - a single value eased toward a moving target, one step per frame."""
from __future__ import annotations

import logging
from typing import Callable

from ease_value.clock import Clock, MonotonicClock
from ease_value.config import EaseOptions, check_finite
from ease_value.easing import EasingFunc, get_easing
from ease_value.events import Emitter, Listener
from ease_value.scheduler import FrameScheduler, get_default_loop
from ease_value.types import DestroyedError

logger = logging.getLogger(__name__)


def quantize(value: float, precision: float) -> float:
    """Round ``value`` to the nearest multiple of ``precision``."""
    return round(value / precision) * precision


class EaseValue:
    """Eases a number toward a target, emitting ``start``, ``step`` and ``stop``.

    ``value_raw`` carries the full-precision interpolation; ``value`` is its
    quantized form and the only value handed to listeners. A run ends when
    the raw value is within ``precision`` of the target, at which point it
    snaps onto the target.

    Args:
        value: Initial value. None leaves the engine unset until the first
            ``to``/``reset``.
        force: Approach rate per 16ms frame, defaults to ``default_force``.
        precision: Quantization step, defaults to ``default_precision``.
        easing: Registry name or easing callable, defaults to ``default_easing``.
        start, step, stop: Listeners registered before the initial value is set.
        clock: Millisecond clock, a ``MonotonicClock`` when omitted.
        scheduler: Frame scheduler, the default loop when omitted.
    """

    default_force: float = 0.1
    default_precision: float = 0.01
    default_easing: str | EasingFunc = "ease_out"

    def __init__(
        self,
        value: float | None = None,
        *,
        force: float | None = None,
        precision: float | None = None,
        easing: str | EasingFunc | None = None,
        start: Listener | None = None,
        step: Listener | None = None,
        stop: Listener | None = None,
        clock: Clock | None = None,
        scheduler: FrameScheduler | None = None,
    ) -> None:
        self._options: EaseOptions | None = EaseOptions(
            value=value,
            force=self.default_force if force is None else force,
            precision=self.default_precision if precision is None else precision,
            easing=self.default_easing if easing is None else easing,
        )
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._scheduler: FrameScheduler = (
            scheduler if scheduler is not None else get_default_loop()
        )
        self._events = Emitter()

        self._value: float | None = None
        self._value_raw: float | None = None
        self._value_initial: float | None = None
        self._value_target: float | None = None
        self._has_initial_value_set = False
        self._is_running = False
        self._destroyed = False
        self._run = 0
        self._time: float = 0.0
        self._timer: int | None = None
        self._step_callback: Callable[[], None] = self._step

        if step is not None:
            self.on("step", step)
        if start is not None:
            self.on("start", start)
        if stop is not None:
            self.on("stop", stop)

        if self._options.value is not None:
            self.to(self._options.value)

    @property
    def options(self) -> EaseOptions:
        if self._options is None:
            raise DestroyedError("EaseValue has been destroyed")
        return self._options

    @property
    def value(self) -> float | None:
        return self._value

    @property
    def value_raw(self) -> float | None:
        return self._value_raw

    @property
    def value_initial(self) -> float | None:
        return self._value_initial

    @property
    def value_target(self) -> float | None:
        return self._value_target

    @property
    def has_initial_value_set(self) -> bool:
        return self._has_initial_value_set

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def on(self, event_name: str, callback: Listener) -> None:
        self._events.on(event_name, callback)

    def off(self, event_name: str, callback: Listener) -> None:
        self._events.off(event_name, callback)

    def to(self, value: float) -> None:
        """Ease toward ``value``. Sets it immediately if no value was ever set."""
        self._check_alive()
        check_finite(value)

        if not self._has_initial_value_set:
            self.reset(value)
            return

        self._value_initial = self._value
        self._value_target = value

        if not self._is_running:
            self._time = self._clock.now()
            self._run += 1
            run = self._run
            logger.debug(f"Run started: {self._value} -> {value}")
            self._events.trigger("start", self._value)
            if self._run != run:
                # A start listener reset or destroyed the engine.
                return
            self._step()

    def reset(self, value: float) -> None:
        """Jump to ``value`` without easing, firing start, step and stop."""
        self._check_alive()
        check_finite(value)

        if value == self._value_raw and value == self._value_target:
            return

        self._cancel_timer()
        self._run += 1
        self._is_running = False
        self._value_raw = self._value_initial = self._value_target = value
        self._value = quantize(value, self.options.precision)
        self._has_initial_value_set = True
        self._time = self._clock.now()

        logger.debug(f"Reset to {self._value}")
        self._events.trigger("start", self._value)
        self._events.trigger("step", self._value)
        self._events.trigger("stop", self._value)

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._cancel_timer()
        self._run += 1
        self._is_running = False
        self._events.clear()
        self._options = None
        self._destroyed = True
        logger.debug("EaseValue destroyed")

    def _check_alive(self) -> None:
        if self._destroyed:
            raise DestroyedError("EaseValue has been destroyed")

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._scheduler.cancel(self._timer)
            self._timer = None

    def _step(self) -> None:
        self._timer = None
        try:
            running = self._advance()
        except Exception:
            self._is_running = False
            raise
        if running:
            self._timer = self._scheduler.schedule(self._step_callback)

    def _advance(self) -> bool:
        """Move one step. Returns True while the run continues."""
        if not self._has_initial_value_set:
            self._is_running = False
            return False

        run = self._run
        options = self.options
        easing = get_easing(options.easing)
        first_run = not self._is_running
        self._is_running = True

        value_target = self._value_target
        value_last = self._value
        now = self._clock.now()
        tdelta = now - self._time

        value = easing(self, tdelta)

        # Within one precision unit the run is over; snap onto the target.
        is_complete = abs(value_target - value) < options.precision

        self._value_raw = value_target if is_complete else value
        self._value = quantize(self._value_raw, options.precision)
        self._time = now

        if self._value != value_last or first_run:
            self._events.trigger("step", self._value)
            if self._run != run:
                # A listener reset, restarted or destroyed the engine.
                return False

        if is_complete:
            self._is_running = False
            logger.debug(f"Run converged at {self._value}")
            self._events.trigger("stop", self._value)
            return False

        return True

    def __repr__(self) -> str:
        return (
            f"EaseValue(value={self._value!r}, target={self._value_target!r}, "
            f"running={self._is_running})"
        )
