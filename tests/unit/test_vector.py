import dataclasses
import math
import warnings

import numpy as np
import pytest

from swingby.core.vector import Vector2D


def test_length_is_euclidean_norm():
    assert Vector2D(3.0, 4.0).length() == 5.0
    assert Vector2D(-3.0, -4.0).length() == 5.0
    assert Vector2D.zero().length() == 0.0


def test_normalize_returns_unit_vector_with_same_direction():
    u = Vector2D(3.0, 4.0).normalize()

    assert np.isclose(u.x, 0.6)
    assert np.isclose(u.y, 0.8)
    assert np.isclose(u.length(), 1.0)


def test_normalize_zero_vector_is_nan_without_raising_or_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        u = Vector2D.zero().normalize()

    assert math.isnan(u.x)
    assert math.isnan(u.y)
    assert not u.is_finite()


def test_scale_and_translate_are_component_wise():
    v = Vector2D(2.0, -3.0)

    assert v.scale(0.5, 2.0) == Vector2D(1.0, -6.0)
    assert v.translate(10.0, 1.0) == Vector2D(12.0, -2.0)


def test_subtract_gives_displacement_from_other():
    a = Vector2D(5.0, 1.0)
    b = Vector2D(2.0, 4.0)

    assert a.subtract(b) == Vector2D(3.0, -3.0)
    assert a - b == a.subtract(b)


def test_arithmetic_operators():
    v = Vector2D(1.0, 2.0)
    w = Vector2D(0.5, -1.0)

    assert v + w == Vector2D(1.5, 1.0)
    assert -v == Vector2D(-1.0, -2.0)
    assert v * 2.0 == Vector2D(2.0, 4.0)
    assert 2.0 * v == Vector2D(2.0, 4.0)
    assert v / 4.0 == Vector2D(0.25, 0.5)


def test_operations_return_new_vectors():
    v = Vector2D(1.0, 2.0)

    v.scale(3.0, 3.0)
    v.translate(1.0, 1.0)
    v.normalize()

    assert v == Vector2D(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]


def test_array_conversion():
    v = Vector2D.from_array(np.array([1.5, -2.5]))

    assert v == Vector2D(1.5, -2.5)
    assert np.array_equal(v.to_array(), np.array([1.5, -2.5]))
    assert tuple(v) == (1.5, -2.5)
