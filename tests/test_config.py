"""Tests for EaseOptions validation."""
from __future__ import annotations

import math

import pytest
from ease_value import EaseOptions, UnknownEasingError


def test_defaults():
    """Defaults match the documented values."""
    options = EaseOptions()
    assert options.value is None
    assert options.force == 0.1
    assert options.precision == 0.01
    assert options.easing == "ease_out"


def test_options_are_frozen():
    """EaseOptions cannot be mutated after creation."""
    options = EaseOptions()
    with pytest.raises(AttributeError):
        options.force = 0.5


@pytest.mark.parametrize("force", [0, -0.1, 1.01, math.nan, math.inf])
def test_invalid_force(force):
    """force must be finite and in (0, 1]."""
    with pytest.raises(ValueError):
        EaseOptions(force=force)


def test_force_of_one_is_allowed():
    """The upper bound is inclusive."""
    assert EaseOptions(force=1).force == 1


@pytest.mark.parametrize("precision", [0, -0.01, math.nan, math.inf])
def test_invalid_precision(precision):
    """precision must be finite and positive."""
    with pytest.raises(ValueError):
        EaseOptions(precision=precision)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "10", True])
def test_invalid_initial_value(value):
    """The initial value must be a finite real number or None."""
    with pytest.raises(ValueError):
        EaseOptions(value=value)


def test_unknown_easing_fails_fast():
    """Unknown easing names are rejected at construction."""
    with pytest.raises(UnknownEasingError):
        EaseOptions(easing="bounce")


def test_non_callable_easing_rejected():
    """easing must be a name or a callable."""
    with pytest.raises(TypeError):
        EaseOptions(easing=3)


def test_callable_easing_accepted():
    """Custom easing callables are accepted as-is."""

    def snap(engine, tdelta):
        return engine.value_target

    assert EaseOptions(easing=snap).easing is snap
