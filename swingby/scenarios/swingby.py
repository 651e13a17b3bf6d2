"""
Swing-by Scenario
=================

Spacecraft flying through an Earth-Moon system.
"""

import numpy as np
from typing import Dict, List, Optional
from dataclasses import dataclass

from ..core.body import Body
from ..core.config import SimulationConfig, create_swingby_config
from ..core.vector import Vector2D
from ..core.world import World
from ..dynamics import diagnostics


@dataclass
class SwingbyScenarioConfig:
    """Configuration for swing-by scenario."""
    duration_frames: int = 7200  # Host frames of 30 days each
    earth_mass_kg: float = 5.9722e24
    moon_mass_kg: float = 5.9722e22
    spacecraft_mass_kg: float = 5.9722e22


def create_swingby_bodies(config: SwingbyScenarioConfig = None) -> List[Body]:
    """Earth, Moon and spacecraft initial conditions."""
    config = config or SwingbyScenarioConfig()
    return [
        Body(
            name="Earth",
            mass=config.earth_mass_kg,
            position=Vector2D(0.0, 0.0),
            velocity=Vector2D(0.0, -20.0),
            color=(255, 0, 0),
        ),
        Body(
            name="Moon",
            mass=config.moon_mass_kg,
            position=Vector2D(5e9, 0.0),
            velocity=Vector2D(0.0, -100.0),
            color=(0, 255, 0),
        ),
        Body(
            name="Spacecraft",
            mass=config.spacecraft_mass_kg,
            position=Vector2D(-5e9, 1e9),
            velocity=Vector2D(-10.0, 150.0),
            color=(0, 0, 255),
        ),
    ]


class SwingbyScenario:
    """
    Three-body swing-by scenario.

    Tests:
    - Spacecraft trajectory bending around Earth
    - Closest approach distances
    - Momentum and energy conservation over many steps
    """

    def __init__(self, config: SwingbyScenarioConfig = None):
        """
        Initialize swing-by scenario.

        Args:
            config: Scenario configuration
        """
        self.config = config or SwingbyScenarioConfig()

        base = create_swingby_config()
        self.sim_config: SimulationConfig = SimulationConfig(
            name=base.name,
            duration_seconds=base.time_step_seconds * self.config.duration_frames,
            time_step_seconds=base.time_step_seconds,
            output_rate_hz=base.output_rate_hz,
        )

        self.world: Optional[World] = None
        self.results: Dict = {}
        self.history = []

        self._closest_earth_m = np.inf
        self._closest_moon_m = np.inf

    def setup(self):
        """Setup scenario."""
        self.world = World(self.sim_config, create_swingby_bodies(self.config))
        self.world.add_step_callback(self._track_approach)

    def _track_approach(self, world: World, state):
        spacecraft = world.get_body("Spacecraft")
        earth = world.get_body("Earth")
        moon = world.get_body("Moon")
        self._closest_earth_m = min(
            self._closest_earth_m, (spacecraft.position - earth.position).length()
        )
        self._closest_moon_m = min(
            self._closest_moon_m, (spacecraft.position - moon.position).length()
        )

    def run(self, progress_callback=None) -> Dict:
        """
        Run swing-by scenario.

        Returns:
            Results dictionary
        """
        if self.world is None:
            self.setup()

        print(f"Running Swing-by Scenario: {self.config.duration_frames} frames")

        bodies = self.world.bodies
        p0 = diagnostics.total_momentum(bodies)
        e0 = diagnostics.total_energy(bodies)
        v0 = self.world.get_body("Spacecraft").speed

        history = self.world.run(progress_callback=progress_callback)
        self.history = history

        spacecraft = self.world.get_body("Spacecraft")
        self.results = {
            'duration_s': self.world.time,
            'duration_days': self.world.clock.elapsed_days,
            'num_samples': len(history),
            'closest_earth_km': self._closest_earth_m / 1000.0,
            'closest_moon_km': self._closest_moon_m / 1000.0,
            'initial_spacecraft_speed_m_s': v0,
            'final_spacecraft_speed_m_s': spacecraft.speed,
            'momentum_drift': diagnostics.momentum_drift(bodies, p0),
            'energy_drift': diagnostics.relative_drift(e0, diagnostics.total_energy(bodies)),
            'finite': self.world.is_finite(),
        }

        return self.results

    def get_summary(self) -> str:
        """Get human-readable summary."""
        if not self.results:
            return "Scenario not yet run."

        return f"""
Swing-by Scenario Summary
=========================
Duration: {self.results['duration_days']:.1f} days
Samples: {self.results['num_samples']}

Encounter:
  Closest approach to Earth: {self.results['closest_earth_km']:.0f} km
  Closest approach to Moon: {self.results['closest_moon_km']:.0f} km
  Spacecraft speed: {self.results['initial_spacecraft_speed_m_s']:.1f} -> {self.results['final_spacecraft_speed_m_s']:.1f} m/s

Conservation:
  Momentum drift: {self.results['momentum_drift']:.3e}
  Energy drift: {self.results['energy_drift']:.3e}
"""
