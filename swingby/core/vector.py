"""
Vector Type
===========

Immutable 2D vector used for positions, velocities and forces.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2D:
    """Two-dimensional vector with value semantics."""
    x: float = 0.0
    y: float = 0.0

    # Makes numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def zero(cls) -> 'Vector2D':
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, values: np.ndarray) -> 'Vector2D':
        """Create from a 2-element array."""
        return cls(values[0], values[1])

    def to_array(self) -> np.ndarray:
        """Return vector as 2-element array."""
        return np.array([self.x, self.y])

    def length(self) -> float:
        """Euclidean norm."""
        return float(np.sqrt(self.x * self.x + self.y * self.y))

    def normalize(self) -> 'Vector2D':
        """
        Unit vector with the same direction.

        A zero-length vector has no direction; the result is then NaN in
        both components instead of an exception.
        """
        length = np.float64(self.length())
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector2D(self.x / length, self.y / length)

    def scale(self, x_scale: float, y_scale: float) -> 'Vector2D':
        """Component-wise scale."""
        return Vector2D(self.x * x_scale, self.y * y_scale)

    def translate(self, dx: float, dy: float) -> 'Vector2D':
        """Component-wise offset."""
        return Vector2D(self.x + dx, self.y + dy)

    def subtract(self, other: 'Vector2D') -> 'Vector2D':
        """Displacement from other to self."""
        return Vector2D(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.x) and np.isfinite(self.y))

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return self.subtract(other)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor: float) -> 'Vector2D':
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> 'Vector2D':
        return Vector2D(self.x / divisor, self.y / divisor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2D({self.x:.6g}, {self.y:.6g})"
