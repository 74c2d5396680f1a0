"""Millisecond clocks used to time easing steps."""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of monotonic time in milliseconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """High-resolution wall clock backed by ``time.perf_counter``."""

    def now(self) -> float:
        return time.perf_counter() * 1000.0


class ManualClock:
    """Deterministic clock that only moves when advanced."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"ms must be >= 0, got {ms}")
        self._now += ms
        return self._now

    def reset(self, now: float = 0.0) -> None:
        self._now = float(now)
