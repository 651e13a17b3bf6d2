import numpy as np
import pytest

from swingby.core.body import Body
from swingby.core.vector import Vector2D
from swingby.dynamics.diagnostics import (
    center_of_mass,
    kinetic_energy,
    momentum_drift,
    potential_energy,
    relative_drift,
    total_energy,
    total_momentum,
)
from swingby.dynamics.gravity import GRAVITATIONAL_CONSTANT


def _pair():
    return [
        Body("A", 2.0, Vector2D(0.0, 0.0), Vector2D(1.0, 0.0)),
        Body("B", 1.0, Vector2D(3.0, 0.0), Vector2D(0.0, -4.0)),
    ]


def test_total_momentum():
    assert total_momentum(_pair()) == Vector2D(2.0, -4.0)
    assert total_momentum([]) == Vector2D.zero()


def test_center_of_mass():
    com = center_of_mass(_pair())

    assert com.x == pytest.approx(1.0)
    assert com.y == 0.0
    assert center_of_mass([]) == Vector2D.zero()


def test_kinetic_energy():
    # 0.5*2*1 + 0.5*1*16
    assert kinetic_energy(_pair()) == pytest.approx(9.0)


def test_potential_energy_counts_each_pair_once():
    bodies = _pair() + [Body("C", 4.0, Vector2D(0.0, 4.0))]
    G = GRAVITATIONAL_CONSTANT

    expected = -G * (2.0 * 1.0 / 3.0 + 2.0 * 4.0 / 4.0 + 1.0 * 4.0 / 5.0)

    assert potential_energy(bodies) == pytest.approx(expected, rel=1e-12)
    assert potential_energy(bodies[:1]) == 0.0


def test_total_energy_with_custom_constant():
    bodies = _pair()

    assert total_energy(bodies, G=1.0) == pytest.approx(9.0 - 2.0 / 3.0)


def test_potential_energy_of_coincident_bodies_is_not_finite():
    bodies = [Body("A", 1.0), Body("B", 1.0)]

    assert not np.isfinite(potential_energy(bodies))


def test_momentum_drift():
    bodies = _pair()
    p0 = total_momentum(bodies)

    assert momentum_drift(bodies, p0) == 0.0

    bodies[1].velocity = Vector2D(0.0, -3.0)
    # |dp| = 1, scale = 2*1 + 1*3
    assert momentum_drift(bodies, p0) == pytest.approx(0.2)


def test_relative_drift():
    assert relative_drift(-10.0, -9.0) == pytest.approx(0.1)
    assert relative_drift(0.0, 0.5) == 0.5
