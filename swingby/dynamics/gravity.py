"""
Gravity Field
=============

Pairwise Newtonian gravity between point masses.
"""

import numpy as np
from typing import List, Sequence, Iterable

from ..core.body import Body
from ..core.vector import Vector2D


GRAVITATIONAL_CONSTANT = 6.67430e-11  # m³ kg⁻¹ s⁻²


class GravityField:
    """
    Direct-summation gravity model.

    Features:
    - Exact inverse-square attraction between every pair of bodies
    - Net force per body, O(n²) pair evaluations per call
    - No softening: coincident bodies give NaN forces
    """

    G = GRAVITATIONAL_CONSTANT

    def force_on(self, a: Body, b: Body) -> Vector2D:
        """
        Force exerted on body a by body b.

        Args:
            a: Body the force acts on
            b: Attracting body

        Returns:
            Force vector [N], pointing from a towards b
        """
        return self._pair_force(a.position, a.mass, b.position, b.mass)

    def _pair_force(self,
                    position_a: Vector2D,
                    mass_a: float,
                    position_b: Vector2D,
                    mass_b: float) -> Vector2D:
        # Displacement points from b to a
        displacement = position_a - position_b
        distance = np.float64(displacement.length())

        # Mass product first keeps force_on(a, b) == -force_on(b, a) exactly
        with np.errstate(divide='ignore', invalid='ignore'):
            magnitude = self.G * (mass_a * mass_b) / (distance * distance)

        direction = displacement.normalize()

        # Attractive: flip the direction back towards b
        return direction * -magnitude

    def net_force_on(self, target: Body, others: Iterable[Body]) -> Vector2D:
        """
        Sum of the forces every other body exerts on target.

        Args:
            target: Body the forces act on
            others: Attracting bodies; target itself is skipped if present

        Returns:
            Net force vector [N]
        """
        total = Vector2D.zero()
        for other in others:
            if other is target:
                continue
            total = total + self.force_on(target, other)
        return total

    def net_forces(self, bodies: Sequence[Body]) -> List[Vector2D]:
        """
        Net force on every body, evaluated at the positions held on entry.

        Args:
            bodies: Ordered bodies

        Returns:
            Net force per body, in the same order
        """
        positions = [body.position for body in bodies]
        masses = [body.mass for body in bodies]

        forces = []
        for i in range(len(bodies)):
            total = Vector2D.zero()
            for j in range(len(bodies)):
                if j == i:
                    continue
                total = total + self._pair_force(
                    positions[i], masses[i], positions[j], masses[j]
                )
            forces.append(total)
        return forces

    def acceleration_on(self, target: Body, others: Iterable[Body]) -> Vector2D:
        """Gravitational acceleration of target [m/s²]."""
        return self.net_force_on(target, others) / target.mass
