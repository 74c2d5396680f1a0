"""ease-value - Frame-driven easing of numeric values toward changing targets."""
from __future__ import annotations

from ease_value.clock import Clock, ManualClock, MonotonicClock
from ease_value.config import EaseOptions
from ease_value.easing import EASINGS, EasingFunc, ease_out, get_easing, linear
from ease_value.events import Emitter
from ease_value.group import EaseValueMultiple, multiple
from ease_value.scheduler import FrameLoop, FrameScheduler, get_default_loop
from ease_value.types import DestroyedError, EaseValueError, UnknownEasingError
from ease_value.value import EaseValue, quantize

__all__ = [
    "EaseValue",
    "EaseValueMultiple",
    "multiple",
    "EaseOptions",
    "EASINGS",
    "EasingFunc",
    "ease_out",
    "linear",
    "get_easing",
    "quantize",
    "Emitter",
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "FrameScheduler",
    "FrameLoop",
    "get_default_loop",
    "EaseValueError",
    "UnknownEasingError",
    "DestroyedError",
]
