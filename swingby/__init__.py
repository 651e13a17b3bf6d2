"""
swingby Gravity Simulation
==========================

Fixed-step Newtonian simulation of a handful of point masses in 2D.

Components:
- Immutable 2D vectors
- Pairwise inverse-square gravity, O(n²) per step
- Semi-implicit (symplectic) Euler integration
- A world that advances every body in two phases per step
- Scenarios: Earth-Moon swing-by, two-body orbit, random systems
"""

__version__ = "1.0.0"

from swingby.core.world import World
from swingby.core.body import Body
from swingby.core.vector import Vector2D
from swingby.core.time_manager import SimulationClock

__all__ = [
    'World',
    'Body',
    'Vector2D',
    'SimulationClock',
]
