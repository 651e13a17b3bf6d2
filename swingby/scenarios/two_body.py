"""
Two-Body Scenario
=================

Heavy primary with a light secondary, the Keplerian sanity case.
"""

import numpy as np
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass

from ..core.body import Body
from ..core.config import SimulationConfig, create_two_body_config, create_mars_flyby_config
from ..core.vector import Vector2D
from ..core.world import World
from ..dynamics import diagnostics
from ..dynamics.gravity import GRAVITATIONAL_CONSTANT


@dataclass
class TwoBodyScenarioConfig:
    """Configuration for two-body scenario."""
    primary_name: str = "Primary"
    primary_mass_kg: float = 6e24
    secondary_name: str = "Secondary"
    secondary_mass_kg: float = 7e22
    separation_m: float = 1e8
    initial_motion: str = 'circular'  # 'rest', 'circular'
    duration_steps: int = 1000
    time_step_seconds: float = 600.0

    # Explicit initial conditions, replacing the ones derived above
    primary_velocity_m_s: Optional[Tuple[float, float]] = None
    secondary_position_m: Optional[Tuple[float, float]] = None
    secondary_velocity_m_s: Optional[Tuple[float, float]] = None


def create_mars_flyby_scenario_config() -> TwoBodyScenarioConfig:
    """Light spacecraft passing a drifting Mars."""
    flyby = create_mars_flyby_config()
    return TwoBodyScenarioConfig(
        primary_name="Mars",
        primary_mass_kg=6.417e23,
        secondary_name="Spacecraft",
        secondary_mass_kg=815.0,
        initial_motion='rest',
        duration_steps=int(round(flyby.duration_seconds / flyby.time_step_seconds)),
        time_step_seconds=flyby.time_step_seconds,
        primary_velocity_m_s=(0.0, -10.0),
        secondary_position_m=(1e8, 1e8),
        secondary_velocity_m_s=(0.0, -700.0),
    )


def circular_orbit_speed(primary_mass: float, secondary_mass: float, separation: float) -> float:
    """Relative speed of a circular two-body orbit [m/s]."""
    return float(np.sqrt(GRAVITATIONAL_CONSTANT * (primary_mass + secondary_mass) / separation))


def create_two_body_bodies(config: TwoBodyScenarioConfig = None) -> List[Body]:
    """
    Primary at the origin, secondary on the +x axis.

    With 'circular' motion both bodies get velocities along y that keep the
    centre of mass at rest.
    """
    config = config or TwoBodyScenarioConfig()

    v_primary = Vector2D.zero()
    v_secondary = Vector2D.zero()

    if config.initial_motion == 'circular':
        v_rel = circular_orbit_speed(
            config.primary_mass_kg, config.secondary_mass_kg, config.separation_m
        )
        total = config.primary_mass_kg + config.secondary_mass_kg
        v_primary = Vector2D(0.0, -v_rel * config.secondary_mass_kg / total)
        v_secondary = Vector2D(0.0, v_rel * config.primary_mass_kg / total)
    elif config.initial_motion != 'rest':
        raise ValueError(f"Unknown initial motion: {config.initial_motion}")

    r_secondary = Vector2D(config.separation_m, 0.0)

    if config.primary_velocity_m_s is not None:
        v_primary = Vector2D(*config.primary_velocity_m_s)
    if config.secondary_position_m is not None:
        r_secondary = Vector2D(*config.secondary_position_m)
    if config.secondary_velocity_m_s is not None:
        v_secondary = Vector2D(*config.secondary_velocity_m_s)

    return [
        Body(config.primary_name, config.primary_mass_kg,
             Vector2D(0.0, 0.0), v_primary, color=(255, 128, 0)),
        Body(config.secondary_name, config.secondary_mass_kg,
             r_secondary, v_secondary, color=(200, 200, 200)),
    ]


class TwoBodyScenario:
    """
    Two-body scenario.

    Tests:
    - Mutual attraction along the line of centres
    - Momentum conservation
    - Separation bounds of a bound orbit
    """

    def __init__(self, config: TwoBodyScenarioConfig = None):
        """
        Initialize two-body scenario.

        Args:
            config: Scenario configuration
        """
        self.config = config or TwoBodyScenarioConfig()

        base = create_two_body_config()
        self.sim_config: SimulationConfig = SimulationConfig(
            name=base.name,
            duration_seconds=self.config.time_step_seconds * self.config.duration_steps,
            time_step_seconds=self.config.time_step_seconds,
            # Every step, so the separation bounds are exact
            output_rate_hz=1.0 / self.config.time_step_seconds,
        )

        self.world: Optional[World] = None
        self.results: Dict = {}
        self.history = []

    def setup(self):
        """Setup scenario."""
        self.world = World(self.sim_config, create_two_body_bodies(self.config))

    def run(self, progress_callback=None) -> Dict:
        """
        Run two-body scenario.

        Returns:
            Results dictionary
        """
        if self.world is None:
            self.setup()

        print(f"Running Two-Body Scenario: {self.config.duration_steps} steps "
              f"of {self.config.time_step_seconds:.0f} s")

        bodies = self.world.bodies
        p0 = diagnostics.total_momentum(bodies)
        e0 = diagnostics.total_energy(bodies)

        history = self.world.run(steps=self.config.duration_steps,
                                 progress_callback=progress_callback)
        self.history = history

        separations = [np.linalg.norm(s.positions_m[1] - s.positions_m[0]) for s in history]

        self.results = {
            'duration_s': self.world.time,
            'num_samples': len(history),
            'separation_min_km': float(np.min(separations)) / 1000.0,
            'separation_max_km': float(np.max(separations)) / 1000.0,
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
Two-Body Scenario Summary
=========================
Duration: {self.results['duration_s']:.1f} s ({self.results['duration_s']/86400:.1f} days)
Samples: {self.results['num_samples']}

Orbit:
  Separation: {self.results['separation_min_km']:.1f} - {self.results['separation_max_km']:.1f} km

Conservation:
  Momentum drift: {self.results['momentum_drift']:.3e}
  Energy drift: {self.results['energy_drift']:.3e}
  Finite state: {self.results['finite']}
"""
