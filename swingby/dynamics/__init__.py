"""
Dynamics Module
===============

Gravity model and numerical integration.
"""

from .gravity import GravityField, GRAVITATIONAL_CONSTANT
from .integrators import SymplecticEuler

__all__ = [
    'GravityField',
    'GRAVITATIONAL_CONSTANT',
    'SymplecticEuler',
]
