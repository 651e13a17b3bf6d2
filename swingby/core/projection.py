"""
Screen Projection
=================

Maps simulation positions into the host's pixel space. Nothing is drawn here.
"""

import numpy as np
from typing import Iterable

from .body import Body
from .config import ScreenParameters
from .vector import Vector2D


def project_to_screen(position: Vector2D, screen: ScreenParameters = None) -> Vector2D:
    """
    Scale a position to pixels, origin at the screen centre.

    Args:
        position: Position in metres
        screen: Screen parameters (defaults used if None)

    Returns:
        Position in pixels
    """
    screen = screen or ScreenParameters()
    return position.scale(screen.x_scale, screen.y_scale).translate(
        screen.width_px / 2.0, screen.height_px / 2.0
    )


def project_bodies(bodies: Iterable[Body], screen: ScreenParameters = None) -> np.ndarray:
    """Pixel positions of bodies as an (n, 2) array."""
    points = [project_to_screen(body.position, screen).to_array() for body in bodies]
    if not points:
        return np.zeros((0, 2))
    return np.array(points)
