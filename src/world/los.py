"""
Line of sight module.
Casts a single ray from an observer to a target tile using the
"strict definition" supercover walk and marks the result on the map.
"""

import logging
import math
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class VisibilityMap(Protocol):
    """Capabilities a map must provide for visibility calculation.

    Every operation is expected to run in constant time.
    """

    def is_out_of_bounds(self, x: int, y: int) -> bool: ...

    def activate(self, x: int, y: int) -> None: ...

    def mark_discovered(self, x: int, y: int) -> None: ...

    def set_lit(self, x: int, y: int) -> None: ...

    def clear_lit(self, x: int, y: int) -> None: ...

    def blocks_sight(self, x: int, y: int) -> bool: ...


def cast_ray(grid: VisibilityMap, x0: int, y0: int, x1: int, y1: int) -> bool:
    """
    Walk from (x0, y0) towards (x1, y1) and light the target if it is reached.

    Args:
        grid: Map implementing VisibilityMap.
        x0: The x-coordinate of the observer.
        y0: The y-coordinate of the observer.
        x1: The x-coordinate of the target.
        y1: The y-coordinate of the target.

    Returns:
        True if the target was reached, False if the ray stopped early on an
        out of bounds or opaque tile.
    """
    dx = x1 - x0
    dy = y1 - y0

    # Quadrant we climb in; equal coordinates fall back to -1
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    dist = math.sqrt(dx * dx + dy * dy)

    xnext, ynext = x0, y0
    while xnext != x1 or ynext != y1:
        if grid.is_out_of_bounds(xnext, ynext):
            logger.debug(
                "Ray (%d, %d)->(%d, %d) left the map at (%d, %d)",
                x0, y0, x1, y1, xnext, ynext,
            )
            return False
        if grid.blocks_sight(xnext, ynext):
            grid.mark_discovered(xnext, ynext)
            logger.debug(
                "Ray (%d, %d)->(%d, %d) blocked at (%d, %d)",
                x0, y0, x1, y1, xnext, ynext,
            )
            return False

        # Point-to-line distance must stay under half a tile.
        # Order matters: x only, then y only, then diagonal.
        if abs(dy * (xnext - x0 + sx) - dx * (ynext - y0)) / dist < 0.5:
            xnext += sx
        elif abs(dy * (xnext - x0) - dx * (ynext - y0 + sy)) / dist < 0.5:
            ynext += sy
        else:
            xnext += sx
            ynext += sy

    grid.set_lit(x1, y1)
    grid.mark_discovered(x1, y1)
    if not grid.is_out_of_bounds(x1, y1):
        grid.activate(x1, y1)
    return True
