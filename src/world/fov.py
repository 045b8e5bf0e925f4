"""
Field of View (FOV) calculation module.
Clears the light around an observer, then casts a ray to every tile
inside the sight circle.
"""

import logging
from typing import Optional

from config import CONFIG, GameConfig
from world.los import VisibilityMap, cast_ray

logger = logging.getLogger(__name__)


def calc_visibility(grid: VisibilityMap, px: int, py: int, radius: int) -> None:
    """
    Recompute what is visible from (px, py).

    Results are written to the grid: tiles in sight are lit, discovered and
    activated; walls that stop a ray are discovered only.

    Args:
        grid: Map implementing VisibilityMap.
        px: The x-coordinate of the observer.
        py: The y-coordinate of the observer.
        radius: The visibility radius, zero or more.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    logger.debug("Calculating visibility at (%d, %d) radius %d", px, py, radius)
    clear_light(grid, px, py, radius)
    sweep_fov(grid, px, py, radius)


refresh_visibility = calc_visibility


def clear_light(grid: VisibilityMap, px: int, py: int, radius: int) -> None:
    """Unlight the square around the observer, one tile wider on the low side."""
    for x in range(px - radius - 1, px + radius):
        for y in range(py - radius - 1, py + radius):
            grid.clear_lit(x, y)


def sweep_fov(grid: VisibilityMap, x: int, y: int, radius: int) -> int:
    """
    Cast a ray to every offset strictly inside the sight circle.

    Offsets outside the map are still swept; the ray handles bounds.

    Returns:
        The number of rays cast.
    """
    radius_sq = radius * radius
    rays = 0

    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            if i * i + j * j < radius_sq:
                cast_ray(grid, x, y, x + i, y + j)
                rays += 1

    return rays


def refresh_from_config(
    grid: VisibilityMap, px: int, py: int, config: Optional[GameConfig] = None
) -> None:
    """Recompute visibility using the configured sight radius."""
    if config is None:
        config = CONFIG
    calc_visibility(grid, px, py, config.sight_radius)
