import math

import numpy as np
import pytest

from swingby.core.body import Body
from swingby.core.vector import Vector2D
from swingby.dynamics.gravity import GravityField, GRAVITATIONAL_CONSTANT


def _pair():
    a = Body("A", 5.9722e24, Vector2D(1.3e8, -4.2e7), Vector2D(10.0, 0.0))
    b = Body("B", 7.342e22, Vector2D(-3.1e6, 2.9e8), Vector2D(0.0, -5.0))
    return a, b


def test_gravitational_constant():
    assert GRAVITATIONAL_CONSTANT == 6.67430e-11
    assert GravityField.G == GRAVITATIONAL_CONSTANT


def test_forces_are_exactly_equal_and_opposite():
    field = GravityField()
    a, b = _pair()

    f_ab = field.force_on(a, b)
    f_ba = field.force_on(b, a)

    assert f_ab.x == -f_ba.x
    assert f_ab.y == -f_ba.y


def test_force_is_attractive_and_follows_inverse_square():
    field = GravityField()
    a, b = _pair()

    force = field.force_on(a, b)
    towards_b = b.position - a.position
    r = towards_b.length()

    # Parallel to the line of centres, pointing at b
    assert force.x * towards_b.x + force.y * towards_b.y > 0
    assert abs(force.x * towards_b.y - force.y * towards_b.x) <= 1e-9 * force.length() * r

    expected = GRAVITATIONAL_CONSTANT * a.mass * b.mass / r**2
    assert force.length() == pytest.approx(expected, rel=1e-12)


def test_force_direction_independent_of_uniform_mass_rescaling():
    field = GravityField()
    a, b = _pair()
    k = 3.7
    a_heavy = Body("A", a.mass * k, a.position)
    b_heavy = Body("B", b.mass * k, b.position)

    f = field.force_on(a, b)
    f_heavy = field.force_on(a_heavy, b_heavy)

    u = f.normalize()
    u_heavy = f_heavy.normalize()
    assert np.isclose(u.x, u_heavy.x, rtol=1e-12)
    assert np.isclose(u.y, u_heavy.y, rtol=1e-12)
    assert f_heavy.length() / f.length() == pytest.approx(k * k, rel=1e-12)


def test_golden_force_on_x_axis():
    field = GravityField()
    heavy = Body("Heavy", 6e24, Vector2D(0.0, 0.0))
    light = Body("Light", 7e22, Vector2D(1e8, 0.0))

    force = field.force_on(light, heavy)

    expected = 6.67430e-11 * 6e24 * 7e22 / 1e16
    assert force.x == pytest.approx(-expected, rel=1e-12)
    assert force.y == 0.0


def test_net_force_skips_target_itself():
    field = GravityField()
    lone = Body("Lone", 1e20, Vector2D(4.0, 2.0))

    assert field.net_force_on(lone, []) == Vector2D(0.0, 0.0)
    assert field.net_force_on(lone, [lone]) == Vector2D(0.0, 0.0)
    assert field.net_forces([lone]) == [Vector2D(0.0, 0.0)]


def test_self_exclusion_is_by_identity_not_distance():
    field = GravityField()
    target = Body("Target", 1e20, Vector2D(0.0, 0.0))
    twin = Body("Twin", 1e20, Vector2D(0.0, 0.0))

    # Same place, different body: the pair is evaluated and gives NaN
    force = field.net_force_on(target, [target, twin])

    assert not force.is_finite()


def test_net_force_is_sum_of_pair_forces():
    field = GravityField()
    a, b = _pair()
    c = Body("C", 1e23, Vector2D(2e8, 2e8))

    net = field.net_force_on(a, [a, b, c])
    expected = field.force_on(a, b) + field.force_on(a, c)

    assert net == expected


def test_net_forces_match_net_force_on_for_every_body():
    field = GravityField()
    a, b = _pair()
    c = Body("C", 1e23, Vector2D(2e8, 2e8))
    bodies = [a, b, c]

    forces = field.net_forces(bodies)

    for body, force in zip(bodies, forces):
        assert force == field.net_force_on(body, bodies)


def test_net_forces_sum_to_zero():
    field = GravityField()
    a, b = _pair()
    c = Body("C", 1e23, Vector2D(2e8, 2e8))

    total = Vector2D.zero()
    forces = field.net_forces([a, b, c])
    for force in forces:
        total = total + force

    scale = max(f.length() for f in forces)
    assert total.length() <= 1e-12 * scale


def test_coincident_bodies_give_nan_force():
    field = GravityField()
    a = Body("A", 1e20, Vector2D(1.0, 1.0))
    b = Body("B", 1e20, Vector2D(1.0, 1.0))

    force = field.force_on(a, b)

    assert math.isnan(force.x)
    assert math.isnan(force.y)


def test_acceleration_is_force_over_mass():
    field = GravityField()
    a, b = _pair()

    accel = field.acceleration_on(a, [b])
    force = field.force_on(a, b)

    assert accel.x == pytest.approx(force.x / a.mass, rel=1e-15)
    assert accel.y == pytest.approx(force.y / a.mass, rel=1e-15)
