"""Exception types for the easing engines."""
from __future__ import annotations


class EaseValueError(Exception):
    """Base class for errors raised by ease_value."""


class UnknownEasingError(EaseValueError, KeyError):
    """Raised when an easing name is not in the registry."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown easing {name!r}")


class DestroyedError(EaseValueError, RuntimeError):
    """Raised when a destroyed engine is asked to animate."""
