"""
Pytest configuration and shared fixtures for visibility tests.
"""

import pytest
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from world.map import GameMap, create_map_from_string


class RecordingMap:
    """Unbounded-by-default map that records every capability call.

    Tiles in ``blocked`` block sight. When ``bounds`` is given as
    (width, height), coordinates outside [0, width) x [0, height) are
    out of bounds.
    """

    def __init__(self, blocked=(), bounds=None):
        self.blocked = set(blocked)
        self.bounds = bounds
        self.calls = []
        self.lit = set()
        self.discovered = set()
        self.activated = []

    def is_out_of_bounds(self, x, y):
        if self.bounds is None:
            return False
        width, height = self.bounds
        return not (0 <= x < width and 0 <= y < height)

    def activate(self, x, y):
        self.calls.append(("activate", x, y))
        self.activated.append((x, y))

    def mark_discovered(self, x, y):
        self.calls.append(("mark_discovered", x, y))
        self.discovered.add((x, y))

    def set_lit(self, x, y):
        self.calls.append(("set_lit", x, y))
        self.lit.add((x, y))

    def clear_lit(self, x, y):
        self.calls.append(("clear_lit", x, y))
        self.lit.discard((x, y))

    def blocks_sight(self, x, y):
        return (x, y) in self.blocked

    def mutations(self, kind=None):
        """Calls other than clear_lit, optionally filtered by name."""
        return [
            call
            for call in self.calls
            if call[0] != "clear_lit" and (kind is None or call[0] == kind)
        ]


@pytest.fixture
def recording_map():
    """An empty, unbounded RecordingMap."""
    return RecordingMap()


@pytest.fixture
def corridor_map():
    """Horizontal corridor along y=0 with a wall at (3, 0)."""
    walls = {(x, y) for x in range(-12, 13) for y in (-1, 1)}
    walls.add((3, 0))
    return RecordingMap(blocked=walls)


@pytest.fixture
def open_map():
    """An 11x11 map of floor tiles."""
    return GameMap(11, 11)


@pytest.fixture
def room_map():
    """A 5x5 walled room with the start position in the middle."""
    return create_map_from_string(
        [
            "#####",
            "#...#",
            "#.@.#",
            "#...#",
            "#####",
        ]
    )
