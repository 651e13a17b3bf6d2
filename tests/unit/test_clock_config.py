from datetime import datetime, timedelta

import pytest

from swingby.core.config import (
    SECONDS_PER_FRAME,
    ScreenParameters,
    SimulationConfig,
    create_mars_flyby_config,
    create_random_system_config,
    create_swingby_config,
    create_two_body_config,
)
from swingby.core.time_manager import SimulationClock


def test_clock_starts_at_zero():
    clock = SimulationClock(time_step=60.0)

    assert clock.elapsed_seconds == 0.0
    assert clock.step_count == 0
    assert clock.time_step == 60.0


def test_clock_step_returns_elapsed_time():
    clock = SimulationClock(time_step=0.5)

    assert clock.step() == 0.5
    assert clock.step() == 1.0
    assert clock.step_count == 2


def test_clock_rejects_non_positive_step():
    with pytest.raises(ValueError):
        SimulationClock(time_step=0.0)
    with pytest.raises(ValueError):
        SimulationClock(time_step=-1.0)


def test_clock_calendar_time():
    epoch = datetime(2030, 6, 1)
    clock = SimulationClock(time_step=43200.0, start_time=epoch)

    clock.step()
    clock.step()

    assert clock.elapsed_days == 1.0
    assert clock.current_utc == epoch + timedelta(days=1)


def test_clock_reset():
    clock = SimulationClock(time_step=10.0)
    for _ in range(5):
        clock.step()

    clock.reset()

    assert clock.elapsed_seconds == 0.0
    assert clock.step_count == 0
    assert clock.time_step == 10.0


def test_frame_time_step_is_half_a_day():
    assert SECONDS_PER_FRAME == pytest.approx(43200.0)
    assert SimulationConfig().time_step_seconds == pytest.approx(43200.0)


def test_default_screen_matches_reference_window():
    screen = ScreenParameters()

    assert (screen.width_px, screen.height_px) == (1080, 720)
    assert screen.x_scale == screen.y_scale == 0.1e-6


@pytest.mark.parametrize("kwargs", [
    {"time_step_seconds": 0.0},
    {"duration_seconds": -1.0},
    {"output_rate_hz": 0.0},
])
def test_config_validation(kwargs):
    with pytest.raises(AssertionError):
        SimulationConfig(**kwargs)


def test_screen_validation():
    with pytest.raises(AssertionError):
        ScreenParameters(width_px=0)
    with pytest.raises(AssertionError):
        ScreenParameters(x_scale=-1.0)


def test_output_interval():
    config = SimulationConfig(output_rate_hz=0.25)

    assert config.output_interval_seconds == 4.0


@pytest.mark.parametrize("factory,name", [
    (create_swingby_config, "swingby"),
    (create_two_body_config, "two-body"),
    (create_mars_flyby_config, "mars-flyby"),
    (create_random_system_config, "random-system"),
])
def test_predefined_configs(factory, name):
    config = factory()

    assert config.name == name
    assert config.duration_seconds >= config.time_step_seconds
    assert config.output_interval_seconds >= config.time_step_seconds
