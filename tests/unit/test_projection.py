import numpy as np
import pytest

from swingby.core.body import Body
from swingby.core.config import ScreenParameters
from swingby.core.projection import project_bodies, project_to_screen
from swingby.core.vector import Vector2D


def test_origin_maps_to_screen_centre():
    assert project_to_screen(Vector2D(0.0, 0.0)) == Vector2D(540.0, 360.0)


def test_positions_are_scaled_to_pixels():
    px = project_to_screen(Vector2D(5e9, -1e9))

    assert px.x == pytest.approx(1040.0)
    assert px.y == pytest.approx(260.0)


def test_custom_screen():
    screen = ScreenParameters(width_px=200, height_px=100, x_scale=1.0, y_scale=2.0)

    assert project_to_screen(Vector2D(3.0, 4.0), screen) == Vector2D(103.0, 58.0)


def test_projection_leaves_position_untouched():
    position = Vector2D(1e8, 2e8)
    project_to_screen(position)

    assert position == Vector2D(1e8, 2e8)


def test_project_bodies():
    bodies = [Body("A", 1.0, Vector2D(0.0, 0.0)), Body("B", 1.0, Vector2D(-5e9, 0.0))]

    pixels = project_bodies(bodies)

    assert pixels.shape == (2, 2)
    assert np.allclose(pixels, [[540.0, 360.0], [40.0, 360.0]])
    assert project_bodies([]).shape == (0, 2)
