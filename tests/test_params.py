from __future__ import annotations

import math

import numpy as np
import pytest

from steerable_freq import FWHM_TO_SIGMA, ParameterSet


def test_defaults() -> None:
    params = ParameterSet(3)
    assert params.size == (64, 64, 64)
    assert params.spacing == (1.0, 1.0, 1.0)
    assert params.origin == (0.0, 0.0, 0.0)
    assert np.array_equal(params.direction, np.identity(3))
    assert params.orientation == (1.0, 0.0, 0.0)
    assert params.angular_bandwidth == pytest.approx(math.pi / 2)
    assert params.modified_count == 0


def test_set_size_same_value_is_a_no_op() -> None:
    params = ParameterSet(2)
    calls = []
    params.add_observer(calls.append)

    assert params.set_size((64, 64)) is False
    assert params.modified_count == 0
    assert calls == []

    assert params.set_size((32, 64)) is True
    assert params.size == (32, 64)
    assert params.modified_count == 1
    assert calls == [params]


@pytest.mark.parametrize(
    "setter, same, changed",
    [
        ("set_spacing", (1.0, 1.0), (0.5, 1.0)),
        ("set_origin", (0.0, 0.0), (-3.0, 2.0)),
        ("set_direction", np.identity(2), [[0.0, -1.0], [1.0, 0.0]]),
        ("set_orientation", (1.0, 0.0), (0.0, 1.0)),
        ("set_angular_bandwidth", math.pi / 2, 0.3),
    ],
)
def test_setters_only_signal_real_changes(setter, same, changed) -> None:
    params = ParameterSet(2)
    assert getattr(params, setter)(same) is False
    assert params.modified_count == 0
    assert getattr(params, setter)(changed) is True
    assert params.modified_count == 1
    assert getattr(params, setter)(changed) is False
    assert params.modified_count == 1


def test_remove_observer() -> None:
    params = ParameterSet(2)
    calls = []
    params.add_observer(calls.append)
    params.remove_observer(calls.append)
    params.set_angular_bandwidth(1.0)
    assert calls == []


@pytest.mark.parametrize(
    "setter, value, match",
    [
        ("set_size", (8,), "entries"),
        ("set_size", (8, 0), "at least 1"),
        ("set_spacing", (1.0, 0.0), "non-zero"),
        ("set_origin", (0.0, 0.0, 0.0), "entries"),
        ("set_direction", np.identity(3), "matrix"),
        ("set_orientation", (0.0, 0.0), "zero vector"),
        ("set_angular_bandwidth", 0.0, "positive"),
        ("set_angular_bandwidth", float("nan"), "positive"),
    ],
)
def test_invalid_values_are_rejected(setter, value, match) -> None:
    params = ParameterSet(2)
    with pytest.raises(ValueError, match=match):
        getattr(params, setter)(value)
    assert params.modified_count == 0


def test_derived_quantities() -> None:
    params = ParameterSet(2)
    params.set_size((8, 5))
    params.set_orientation((3.0, 4.0))
    params.set_angular_bandwidth(2.0)
    assert params.center == (4.0, 2.5)
    assert params.orientation_radius == pytest.approx(5.0)
    assert params.angular_sigma == pytest.approx(1.0 / FWHM_TO_SIGMA)


def test_direction_is_returned_as_copy() -> None:
    params = ParameterSet(2)
    direction = params.direction
    direction[0, 0] = 5.0
    assert params.direction[0, 0] == 1.0


def test_describe_lists_fields() -> None:
    params = ParameterSet(2)
    text = params.describe()
    assert "Orientation" in text
    assert "[64, 64]" in text
    assert "ParameterSet" in repr(params)


@pytest.mark.parametrize("orientation", [(float("nan"), 0.0), (float("inf"), 1.0)])
def test_non_finite_orientation_is_rejected(orientation) -> None:
    params = ParameterSet(2)
    with pytest.raises(ValueError, match="finite"):
        params.set_orientation(orientation)
    assert params.orientation == (1.0, 0.0)


def test_fractional_size_is_rejected() -> None:
    params = ParameterSet(2)
    with pytest.raises(ValueError, match="whole numbers"):
        params.set_size((8.9, 8))
    assert params.size == (64, 64)
    assert params.set_size((8.0, 8)) is True
    assert params.size == (8, 8)
