"""Easing functions computing the next raw value of an easing engine.

Each function takes the engine and the milliseconds elapsed since its
previous step. ``force`` is scaled to a nominal 16ms frame so convergence
speed does not depend on the frame rate.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ease_value.types import UnknownEasingError

if TYPE_CHECKING:
    from ease_value.value import EaseValue

EasingFunc = Callable[["EaseValue", float], float]

FRAME_MS = 16.0


def _frame_force(engine: EaseValue, tdelta: float) -> float:
    return engine.options.force * tdelta / FRAME_MS


def ease_out(engine: EaseValue, tdelta: float) -> float:
    """Exponential approach: covers ``force`` of the remaining distance per frame."""
    target = engine.value_target
    raw = engine.value_raw
    delta = target - raw
    force = _frame_force(engine, tdelta)

    if delta > 0:
        return min(target, raw + delta * force)
    return max(target, raw + delta * force)


def linear(engine: EaseValue, tdelta: float) -> float:
    """Constant speed: moves ``force`` units per frame."""
    target = engine.value_target
    raw = engine.value_raw
    force = _frame_force(engine, tdelta)

    if target - raw > 0:
        return min(target, raw + force)
    return max(target, raw - force)


EASINGS: dict[str, EasingFunc] = {
    "ease_out": ease_out,
    "linear": linear,
}


def get_easing(easing: str | EasingFunc) -> EasingFunc:
    """Resolve a registry name or pass a callable through."""
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise UnknownEasingError(easing) from None
