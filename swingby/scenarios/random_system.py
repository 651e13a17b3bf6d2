"""
Random System Scenario
======================

Randomly generated bodies, for exploring arbitrary initial conditions.
"""

import numpy as np
from typing import Dict, List, Optional
from dataclasses import dataclass

from ..core.body import Body
from ..core.config import SimulationConfig, create_random_system_config
from ..core.vector import Vector2D
from ..core.world import World
from ..dynamics import diagnostics


PLANET_NAMES = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
    "Pluto",
)


@dataclass
class RandomSystemScenarioConfig:
    """Configuration for random system scenario."""
    body_count: int = 3
    seed: Optional[int] = None
    duration_frames: int = 600
    max_mass_kg: float = 6.417e25
    position_range_m: float = 1e8
    position_scale: float = 1.0
    max_speed_m_s: float = 3500.0

    def __post_init__(self):
        assert self.body_count > 0, "Need at least one body"
        assert self.max_mass_kg > 0, "Maximum mass must be positive"


def create_random_body(rng: np.random.Generator,
                       config: RandomSystemScenarioConfig = None) -> Body:
    """
    Create a body with random name, mass, position, velocity and color.

    Args:
        rng: Random generator
        config: Ranges to draw from

    Returns:
        New body
    """
    config = config or RandomSystemScenarioConfig()

    name = PLANET_NAMES[rng.integers(len(PLANET_NAMES))]

    # Uniform in [0, max); redraw the measure-zero zero mass
    mass = 0.0
    while mass <= 0.0:
        mass = rng.random() * config.max_mass_kg

    span = config.position_range_m
    position = Vector2D(
        (rng.random() * 2 * span - span) * config.position_scale,
        (rng.random() * 2 * span - span) * config.position_scale,
    )

    v = config.max_speed_m_s
    velocity = Vector2D(
        rng.random() * 2 * v - v,
        rng.random() * 2 * v - v,
    )

    color = tuple(int(c) for c in rng.integers(0, 256, size=3))

    return Body(name=name, mass=mass, position=position, velocity=velocity, color=color)


def create_random_bodies(config: RandomSystemScenarioConfig = None) -> List[Body]:
    """Draw body_count bodies from a generator seeded with config.seed."""
    config = config or RandomSystemScenarioConfig()
    rng = np.random.default_rng(config.seed)
    return [create_random_body(rng, config) for _ in range(config.body_count)]


class RandomSystemScenario:
    """
    Random system scenario.

    Tests:
    - Arbitrary body counts and initial conditions
    - Reproducibility from a seed
    - Conservation under close encounters
    """

    def __init__(self, config: RandomSystemScenarioConfig = None):
        """
        Initialize random system scenario.

        Args:
            config: Scenario configuration
        """
        self.config = config or RandomSystemScenarioConfig()

        base = create_random_system_config()
        self.sim_config: SimulationConfig = SimulationConfig(
            name=base.name,
            duration_seconds=base.time_step_seconds * self.config.duration_frames,
            time_step_seconds=base.time_step_seconds,
            output_rate_hz=base.output_rate_hz,
        )

        self.world: Optional[World] = None
        self.results: Dict = {}
        self.history = []

    def setup(self):
        """Setup scenario."""
        self.world = World(self.sim_config, create_random_bodies(self.config))

    def run(self, progress_callback=None) -> Dict:
        """
        Run random system scenario.

        Returns:
            Results dictionary
        """
        if self.world is None:
            self.setup()

        print(f"Running Random System Scenario: {self.config.body_count} bodies, "
              f"seed {self.config.seed}")

        bodies = self.world.bodies
        p0 = diagnostics.total_momentum(bodies)
        e0 = diagnostics.total_energy(bodies)

        history = self.world.run(progress_callback=progress_callback)
        self.history = history

        speeds = [body.speed for body in bodies]

        self.results = {
            'duration_s': self.world.time,
            'num_samples': len(history),
            'body_names': [body.name for body in bodies],
            'total_mass_kg': float(sum(body.mass for body in bodies)),
            'max_final_speed_m_s': float(max(speeds)),
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
Random System Scenario Summary
==============================
Duration: {self.results['duration_s']:.1f} s
Samples: {self.results['num_samples']}
Bodies: {', '.join(self.results['body_names'])}
Total mass: {self.results['total_mass_kg']:.3e} kg

Dynamics:
  Max final speed: {self.results['max_final_speed_m_s']:.1f} m/s
  Momentum drift: {self.results['momentum_drift']:.3e}
  Energy drift: {self.results['energy_drift']:.3e}
  Finite state: {self.results['finite']}
"""
