"""
Conservation Diagnostics
========================

Momentum and energy bookkeeping for a set of bodies.
"""

import numpy as np
from typing import Sequence

from ..core.body import Body
from ..core.vector import Vector2D
from .gravity import GRAVITATIONAL_CONSTANT


def total_momentum(bodies: Sequence[Body]) -> Vector2D:
    """Sum of m*v over all bodies [kg m/s]."""
    total = Vector2D.zero()
    for body in bodies:
        total = total + body.momentum
    return total


def center_of_mass(bodies: Sequence[Body]) -> Vector2D:
    """Mass-weighted mean position [m]."""
    if not bodies:
        return Vector2D.zero()
    masses = np.array([body.mass for body in bodies])
    positions = np.array([body.position.to_array() for body in bodies])
    return Vector2D.from_array(masses @ positions / masses.sum())


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """Total kinetic energy [J]."""
    return float(sum(body.kinetic_energy for body in bodies))


def potential_energy(bodies: Sequence[Body], G: float = GRAVITATIONAL_CONSTANT) -> float:
    """
    Total gravitational potential energy [J].

    Each unordered pair contributes -G m_i m_j / r_ij once.
    """
    n = len(bodies)
    if n < 2:
        return 0.0

    masses = np.array([body.mass for body in bodies])
    positions = np.array([body.position.to_array() for body in bodies])

    diff = positions[:, None, :] - positions[None, :, :]
    r = np.sqrt(np.sum(diff * diff, axis=-1))

    iu = np.triu_indices(n, 1)
    mprod = (masses[:, None] * masses[None, :])[iu]

    with np.errstate(divide='ignore', invalid='ignore'):
        return float(-G * np.sum(mprod / r[iu]))


def total_energy(bodies: Sequence[Body], G: float = GRAVITATIONAL_CONSTANT) -> float:
    """Kinetic plus potential energy [J]."""
    return kinetic_energy(bodies) + potential_energy(bodies, G)


def momentum_drift(bodies: Sequence[Body], initial: Vector2D) -> float:
    """
    Change of total momentum relative to the momentum scale of the system.

    The scale is sum(m |v|), so a system at rest with zero net momentum
    still gets a meaningful ratio once it starts moving.
    """
    change = (total_momentum(bodies) - initial).length()
    scale = sum(body.mass * body.speed for body in bodies)
    if scale == 0.0:
        return change
    return change / scale


def relative_drift(initial: float, current: float) -> float:
    """Relative change |current - initial| / |initial|, or absolute change if initial is 0."""
    if initial == 0.0:
        return abs(current)
    return abs(current - initial) / abs(initial)
