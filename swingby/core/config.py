"""
Simulation Configuration
========================

Time stepping, output and display parameters for swingby.
"""

from dataclasses import dataclass, field
from datetime import datetime


# One 60 Hz frame of the reference host represents 30 days
SECONDS_PER_FRAME = 1.0 / 60.0 * 60 * 60 * 24 * 30


@dataclass
class ScreenParameters:
    """Mapping from simulation metres to host pixels."""
    width_px: int = 1080
    height_px: int = 720
    x_scale: float = 0.1e-6  # px per m
    y_scale: float = 0.1e-6  # px per m

    def __post_init__(self):
        assert self.width_px > 0 and self.height_px > 0, "Screen size must be positive"
        assert self.x_scale > 0 and self.y_scale > 0, "Screen scale must be positive"


@dataclass
class SimulationConfig:
    """Complete simulation configuration."""
    name: str = "swingby"

    # Simulation timing
    start_time: datetime = field(default_factory=lambda: datetime(2026, 1, 1, 0, 0, 0))
    duration_seconds: float = SECONDS_PER_FRAME * 600  # 10 s of host frames
    time_step_seconds: float = SECONDS_PER_FRAME

    # Output options
    output_rate_hz: float = 1.0 / SECONDS_PER_FRAME  # Record every step
    save_trajectory: bool = True
    verbose: bool = True

    screen: ScreenParameters = field(default_factory=ScreenParameters)

    def __post_init__(self):
        """Validate configuration."""
        assert self.time_step_seconds > 0, "Time step must be positive"
        assert self.duration_seconds > 0, "Duration must be positive"
        assert self.output_rate_hz > 0, "Output rate must be positive"

    @property
    def output_interval_seconds(self) -> float:
        """Simulated time between recorded states."""
        return 1.0 / self.output_rate_hz


# Pre-defined configurations
def create_swingby_config() -> SimulationConfig:
    """Earth, Moon and spacecraft over one simulated decade."""
    return SimulationConfig(
        name="swingby",
        duration_seconds=SECONDS_PER_FRAME * 60 * 120,
        time_step_seconds=SECONDS_PER_FRAME,
        output_rate_hz=1.0 / (SECONDS_PER_FRAME * 10),
    )


def create_two_body_config() -> SimulationConfig:
    """Heavy primary and light secondary, ten-minute steps over about a week."""
    return SimulationConfig(
        name="two-body",
        duration_seconds=600.0 * 1000,
        time_step_seconds=600.0,
        output_rate_hz=1.0 / 3600.0,
    )


def create_mars_flyby_config() -> SimulationConfig:
    """Spacecraft passing Mars, one-minute steps."""
    return SimulationConfig(
        name="mars-flyby",
        duration_seconds=86400.0 * 10,
        time_step_seconds=60.0,
        output_rate_hz=1.0 / 3600.0,
    )


def create_random_system_config() -> SimulationConfig:
    """Randomly generated bodies at the reference frame rate."""
    return SimulationConfig(
        name="random-system",
        duration_seconds=SECONDS_PER_FRAME * 600,
        time_step_seconds=SECONDS_PER_FRAME,
        output_rate_hz=1.0 / (SECONDS_PER_FRAME * 5),
    )
