"""
Body Model
==========

Point mass taking part in the gravity simulation.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .vector import Vector2D


Color = Tuple[int, int, int]


@dataclass(eq=False)
class Body:
    """
    Point mass with position and velocity.

    Planets, moons and spacecraft are all bodies; name and color are
    presentation metadata and are never read by the physics.

    Bodies compare by identity so that a body can be told apart from a
    different body that happens to sit at the same place.
    """
    name: str
    mass: float  # kg
    position: Vector2D = field(default_factory=Vector2D.zero)  # m
    velocity: Vector2D = field(default_factory=Vector2D.zero)  # m/s
    color: Color = (255, 255, 255)

    # World the body belongs to, set by World.add_body
    _world: Optional[Any] = field(default=None, init=False, repr=False)

    def __setattr__(self, name: str, value):
        # Mass is checked on every assignment, not only at construction
        if name == "mass":
            value = float(value)
            if not np.isfinite(value) or value <= 0.0:
                raise ValueError(f"Body '{self.name}' must have a positive finite mass, got {value}")
        super().__setattr__(name, value)

    def __post_init__(self):
        """Convert position and velocity to vectors."""
        if not isinstance(self.position, Vector2D):
            self.position = Vector2D(*self.position)
        if not isinstance(self.velocity, Vector2D):
            self.velocity = Vector2D(*self.velocity)

    @property
    def speed(self) -> float:
        """Speed magnitude [m/s]."""
        return self.velocity.length()

    @property
    def momentum(self) -> Vector2D:
        """Linear momentum [kg m/s]."""
        return self.velocity * self.mass

    @property
    def kinetic_energy(self) -> float:
        """Kinetic energy [J]."""
        return 0.5 * self.mass * (self.velocity.x ** 2 + self.velocity.y ** 2)

    def copy(self) -> 'Body':
        """Independent body with the same state."""
        return Body(
            name=self.name,
            mass=self.mass,
            position=self.position,
            velocity=self.velocity,
            color=self.color,
        )

    def to_array(self) -> np.ndarray:
        """Return state as [x, y, vx, vy]."""
        return np.concatenate([self.position.to_array(), self.velocity.to_array()])

    def __repr__(self) -> str:
        return (f"Body({self.name!r}, mass={self.mass:.4g}kg, "
                f"position={self.position}, velocity={self.velocity})")
