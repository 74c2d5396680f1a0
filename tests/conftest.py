"""Shared fixtures: a manual clock and a frame loop stepped together."""
from __future__ import annotations

from typing import Any, Callable

import pytest
from ease_value import EaseValue, FrameLoop, ManualClock

FRAME_MS = 16.0


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def loop() -> FrameLoop:
    return FrameLoop(fps=60)


@pytest.fixture
def frames(clock: ManualClock, loop: FrameLoop) -> Callable[..., None]:
    """Advance the clock by one 16ms frame and tick the loop, ``n`` times."""

    def advance(n: int = 1, ms: float = FRAME_MS) -> None:
        for _ in range(n):
            clock.advance(ms)
            loop.tick()

    return advance


@pytest.fixture
def record() -> Callable[[Any], list[tuple[str, Any]]]:
    """Attach start/step/stop listeners and return the list they append to."""

    def attach(target: Any) -> list[tuple[str, Any]]:
        events: list[tuple[str, Any]] = []
        for name in ("start", "step", "stop"):
            target.on(name, lambda value, name=name: events.append((name, value)))
        return events

    return attach


@pytest.fixture
def ease(clock: ManualClock, loop: FrameLoop) -> Callable[..., EaseValue]:
    """Build EaseValues wired to the test clock and loop."""

    def factory(value: float | None = 0.0, **kwargs: Any) -> EaseValue:
        return EaseValue(value, clock=clock, scheduler=loop, **kwargs)

    return factory
