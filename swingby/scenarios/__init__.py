"""
Simulation Scenarios
====================

Pre-configured scenarios for swingby.
"""

from .swingby import SwingbyScenario
from .two_body import TwoBodyScenario
from .random_system import RandomSystemScenario

__all__ = [
    'SwingbyScenario',
    'TwoBodyScenario',
    'RandomSystemScenario',
]
