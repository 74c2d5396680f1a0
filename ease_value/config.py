"""Easing engine configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from ease_value.easing import EasingFunc, get_easing


def check_finite(value: object, name: str = "value") -> float:
    """Return ``value`` if it is a finite real number, else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class EaseOptions:
    """Immutable configuration of a single easing engine.

    Attributes:
        value: Initial target, or None to start without a value.
        force: Share of the remaining approach covered per 16ms frame, in (0, 1].
        precision: Quantization step of the observed value and the
            convergence threshold.
        easing: Name in ``EASINGS`` or an easing callable.
    """

    value: float | None = None
    force: float = 0.1
    precision: float = 0.01
    easing: str | EasingFunc = "ease_out"

    def __post_init__(self) -> None:
        if self.value is not None:
            check_finite(self.value, "value")
        check_finite(self.force, "force")
        if not 0 < self.force <= 1:
            raise ValueError(f"force must be in (0, 1], got {self.force}")
        check_finite(self.precision, "precision")
        if self.precision <= 0:
            raise ValueError(f"precision must be > 0, got {self.precision}")
        if not isinstance(self.easing, str) and not callable(self.easing):
            raise TypeError(f"easing must be a name or a callable, got {self.easing!r}")
        get_easing(self.easing)
