"""
Numerical Integrators
=====================

Fixed-step integration of body motion under a known force.
"""

from typing import Tuple

from ..core.body import Body
from ..core.vector import Vector2D


class SymplecticEuler:
    """
    Symplectic Euler integrator for Hamiltonian systems.

    Preserves phase space volume (important for long-term orbital dynamics).
    The velocity is updated first and the position is advanced with the new
    velocity; swapping the two turns this into explicit Euler, which drifts
    in energy.
    """

    def step(self,
             position: Vector2D,
             velocity: Vector2D,
             force: Vector2D,
             mass: float,
             dt: float) -> Tuple[Vector2D, Vector2D]:
        """
        Perform symplectic Euler step.

        Args:
            position: Position [m]
            velocity: Velocity [m/s]
            force: Net force held constant over the step [N]
            mass: Mass [kg]
            dt: Time step [s]

        Returns:
            Tuple of (new_position, new_velocity)
        """
        # F = ma
        acceleration = force / mass

        # Semi-implicit: update velocity first, then position
        v_new = velocity + acceleration * dt
        r_new = position + v_new * dt

        return r_new, v_new

    def advance(self, body: Body, net_force: Vector2D, dt: float) -> Body:
        """
        Apply one step to a body in place.

        Args:
            body: Body to move
            net_force: Net external force on the body [N]
            dt: Time step [s]

        Returns:
            The same body, updated
        """
        body.position, body.velocity = self.step(
            body.position, body.velocity, net_force, body.mass, dt
        )
        return body
