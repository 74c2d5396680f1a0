"""Tests for the millisecond clocks."""
from __future__ import annotations

import pytest
from ease_value import Clock, ManualClock, MonotonicClock


def test_manual_clock_starts_at_zero():
    """ManualClock defaults to time 0."""
    assert ManualClock().now() == 0.0


def test_manual_clock_custom_start():
    """ManualClock honours a custom start time."""
    assert ManualClock(start=250.0).now() == 250.0


def test_manual_clock_only_moves_when_advanced():
    """now() is stable until advance() is called."""
    clock = ManualClock()
    assert clock.now() == clock.now()

    assert clock.advance(16.0) == 16.0
    assert clock.advance(4.5) == 20.5
    assert clock.now() == 20.5


def test_manual_clock_rejects_negative_advance():
    """Time cannot move backwards."""
    clock = ManualClock()
    with pytest.raises(ValueError):
        clock.advance(-1.0)


def test_manual_clock_reset():
    """reset() sets the current time."""
    clock = ManualClock()
    clock.advance(100.0)
    clock.reset()
    assert clock.now() == 0.0
    clock.reset(40.0)
    assert clock.now() == 40.0


def test_monotonic_clock_never_goes_backwards():
    """MonotonicClock readings are non-decreasing."""
    clock = MonotonicClock()
    readings = [clock.now() for _ in range(100)]
    assert readings == sorted(readings)


def test_clocks_satisfy_protocol():
    """Both clocks conform to the Clock protocol."""
    assert isinstance(ManualClock(), Clock)
    assert isinstance(MonotonicClock(), Clock)
