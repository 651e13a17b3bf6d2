"""
Simulation Clock
================

Fixed-step time keeping for the simulation.
"""

from datetime import datetime, timedelta


class SimulationClock:
    """
    Manages simulation time.

    Provides:
    - Elapsed time and step count tracking
    - A constant time step for the whole run
    - Calendar time relative to a start epoch
    """

    SECONDS_PER_DAY = 86400.0

    def __init__(self,
                 time_step: float,
                 start_time: datetime = None):
        """
        Initialize simulation clock.

        Args:
            time_step: Time step in seconds
            start_time: Calendar epoch of elapsed time zero
        """
        if time_step <= 0:
            raise ValueError(f"Time step must be positive, got {time_step}")
        self._time_step = float(time_step)
        self.start_time = start_time or datetime(2026, 1, 1, 0, 0, 0)
        self.elapsed_seconds = 0.0
        self.step_count = 0

    @property
    def time_step(self) -> float:
        """Time step in seconds, fixed for the life of the clock."""
        return self._time_step

    def reset(self):
        """Reset simulation time to start."""
        self.elapsed_seconds = 0.0
        self.step_count = 0

    def step(self) -> float:
        """
        Advance time by one step.

        Returns:
            Current elapsed time in seconds
        """
        self.elapsed_seconds += self._time_step
        self.step_count += 1
        return self.elapsed_seconds

    @property
    def elapsed_days(self) -> float:
        return self.elapsed_seconds / self.SECONDS_PER_DAY

    @property
    def current_utc(self) -> datetime:
        """Get current calendar time."""
        return self.start_time + timedelta(seconds=self.elapsed_seconds)

    def __repr__(self) -> str:
        return f"SimulationClock(utc={self.current_utc}, elapsed={self.elapsed_seconds:.3f}s)"
