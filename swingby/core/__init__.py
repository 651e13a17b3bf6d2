"""
Simulation Core Module
======================

Core simulation components.
"""

from .vector import Vector2D
from .body import Body
from .config import SimulationConfig, ScreenParameters
from .time_manager import SimulationClock
from .world import World, WorldState

__all__ = [
    'Vector2D',
    'Body',
    'SimulationConfig',
    'ScreenParameters',
    'SimulationClock',
    'World',
    'WorldState',
]
