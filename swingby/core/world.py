"""
Simulation World
================

Owns the bodies and the clock and advances them one fixed step at a time.
"""

import logging
import numpy as np
from typing import Optional, Dict, List, Callable, Iterable, Tuple
from dataclasses import dataclass, field

from .body import Body
from .config import SimulationConfig
from .time_manager import SimulationClock
from ..dynamics.gravity import GravityField
from ..dynamics.integrators import SymplecticEuler

logger = logging.getLogger(__name__)


@dataclass
class WorldState:
    """Complete world state for logging."""
    time_s: float = 0.0
    step: int = 0
    positions_m: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))
    velocities_m_s: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))


class World:
    """
    Fixed-step gravity simulation.

    Each step runs in two phases:
    - every net force is computed from the pre-step positions
    - every body is then advanced with symplectic Euler

    No body moves before all forces of the step are known, so the result
    does not depend on the order of the bodies.
    """

    def __init__(self,
                 config: SimulationConfig = None,
                 bodies: Iterable[Body] = (),
                 gravity: GravityField = None,
                 integrator: SymplecticEuler = None):
        """
        Initialize world.

        Args:
            config: Simulation configuration
            bodies: Initial bodies, owned by the world from now on
            gravity: Force model
            integrator: Integration scheme
        """
        self.config = config or SimulationConfig()

        self.clock = SimulationClock(
            time_step=self.config.time_step_seconds,
            start_time=self.config.start_time,
        )

        self.gravity = gravity or GravityField()
        self.integrator = integrator or SymplecticEuler()

        self._bodies: List[Body] = []
        self._initial_bodies: List[Body] = []
        self._finite = True

        self.is_running = False

        # Data logging
        self.history: List[WorldState] = []

        # Callbacks
        self.step_callbacks: List[Callable] = []

        for body in bodies:
            self.add_body(body)

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Bodies in insertion order."""
        return tuple(self._bodies)

    @property
    def body_count(self) -> int:
        return len(self._bodies)

    @property
    def time(self) -> float:
        """Elapsed simulation time [s]."""
        return self.clock.elapsed_seconds

    @property
    def dt(self) -> float:
        """Fixed time step [s]."""
        return self.clock.time_step

    @property
    def step_count(self) -> int:
        return self.clock.step_count

    def add_body(self, body: Body) -> int:
        """
        Add a body to the world.

        Args:
            body: Body to add

        Returns:
            Index of the body

        Raises:
            ValueError: If the body already belongs to this or another world
        """
        if body._world is self:
            raise ValueError(f"Body '{body.name}' is already part of this world")
        if body._world is not None:
            raise ValueError(f"Body '{body.name}' is owned by another world")

        body._world = self
        self._bodies.append(body)
        self._initial_bodies.append(body.copy())
        return len(self._bodies) - 1

    def get_body(self, name: str) -> Optional[Body]:
        """
        Get the first body with the given name.

        Args:
            name: Body name

        Returns:
            Body if found, None otherwise
        """
        for body in self._bodies:
            if body.name == name:
                return body
        return None

    def reset(self):
        """Reset world to the initial conditions."""
        self.clock.reset()
        for body, initial in zip(self._bodies, self._initial_bodies):
            body.position = initial.position
            body.velocity = initial.velocity
        self.history.clear()
        self._finite = True

    def step(self) -> WorldState:
        """
        Advance simulation by one time step.

        Returns:
            State after the step
        """
        dt = self.clock.time_step

        # === Force phase: pre-step positions only ===
        forces = self.gravity.net_forces(self._bodies)

        # === Commit phase ===
        for body, force in zip(self._bodies, forces):
            self.integrator.advance(body, force, dt)

        self.clock.step()

        state = self.snapshot()

        if self._finite and not self.is_finite():
            self._finite = False
            logger.warning("Non-finite body state at t=%.3fs (step %d); "
                           "coincident bodies produce undefined forces",
                           state.time_s, state.step)

        logger.debug("Step %d: t=%.3fs", state.step, state.time_s)

        # Log state
        if self.config.save_trajectory and (
                len(self.history) == 0 or
                (state.time_s - self.history[-1].time_s) >=
                self.config.output_interval_seconds - 1e-9 * dt):
            self.history.append(state)

        # Call callbacks
        for callback in self.step_callbacks:
            callback(self, state)

        return state

    def run(self,
            duration_seconds: float = None,
            steps: int = None,
            progress_callback: Callable = None) -> List[WorldState]:
        """
        Run simulation for a duration or a number of steps.

        Args:
            duration_seconds: Duration (default: config duration)
            steps: Number of steps; takes precedence over duration
            progress_callback: Called with progress (0-1)

        Returns:
            List of logged states
        """
        if steps is None:
            duration = (self.config.duration_seconds if duration_seconds is None
                        else duration_seconds)
            # Round to the nearest step count so float accumulation cannot add one
            steps = int(round(duration / self.clock.time_step))

        self.is_running = True

        if self.config.save_trajectory and not self.history:
            self.history.append(self.snapshot())

        for i in range(steps):
            self.step()

            if progress_callback and ((i + 1) % 100 == 0 or i + 1 == steps):
                progress_callback((i + 1) / steps)

        self.is_running = False

        if self.config.verbose:
            logger.info("Simulation complete: %d steps, %d logged states",
                        self.clock.step_count, len(self.history))

        return self.history

    def add_step_callback(self, callback: Callable):
        """Add callback to be called each step."""
        self.step_callbacks.append(callback)

    def snapshot(self) -> WorldState:
        """Copy of the current positions and velocities."""
        if not self._bodies:
            return WorldState(time_s=self.time, step=self.step_count)

        return WorldState(
            time_s=self.time,
            step=self.step_count,
            positions_m=np.array([b.position.to_array() for b in self._bodies]),
            velocities_m_s=np.array([b.velocity.to_array() for b in self._bodies]),
        )

    def is_finite(self) -> bool:
        """True while every position and velocity is a finite number."""
        return all(b.position.is_finite() and b.velocity.is_finite() for b in self._bodies)

    def get_state(self) -> Dict:
        """
        Get current world state.

        Returns:
            Dictionary of state values
        """
        return {
            'time_s': self.time,
            'time_days': self.clock.elapsed_days,
            'step': self.step_count,
            'utc': self.clock.current_utc.isoformat(),
            'bodies': [
                {
                    'name': body.name,
                    'mass_kg': body.mass,
                    'position_m': list(body.position),
                    'velocity_m_s': list(body.velocity),
                    'speed_m_s': body.speed,
                }
                for body in self._bodies
            ],
        }

    def export_trajectory(self, filename: str = None) -> np.ndarray:
        """
        Export trajectory data.

        Args:
            filename: Optional CSV filename

        Returns:
            Trajectory data array, one row per logged state:
            [time_s, x0, y0, vx0, vy0, x1, y1, ...]
        """
        if not self.history:
            return np.array([])

        n = self.body_count
        data = np.zeros((len(self.history), 1 + 4 * n))

        for i, state in enumerate(self.history):
            data[i, 0] = state.time_s
            for j in range(n):
                data[i, 1 + 4*j:3 + 4*j] = state.positions_m[j]
                data[i, 3 + 4*j:5 + 4*j] = state.velocities_m_s[j]

        if filename:
            columns = ["time_s"]
            for body in self._bodies:
                columns += [f"{body.name}_{c}" for c in ("x_m", "y_m", "vx_m_s", "vy_m_s")]
            np.savetxt(filename, data, delimiter=',', header=",".join(columns))

        return data

    def __repr__(self) -> str:
        return f"World(bodies={self.body_count}, t={self.time:.3f}s, dt={self.dt}s)"
