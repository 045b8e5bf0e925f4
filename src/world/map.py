import logging
import numpy as np
from typing import Callable, Dict, List, Optional, Set, Tuple

from config import CONFIG

logger = logging.getLogger(__name__)

# Tile types represented as integers for memory efficiency
TILE_FLOOR = 0
TILE_WALL = 1
TILE_DOOR = 2
TILE_WATER = 3
TILE_GRASS = 4
TILE_TREE = 5

Coord = Tuple[int, int]
ActivationListener = Callable[[int, int], None]


class Tile:
    """Represents a single tile type in the game world."""

    __slots__ = ["tile_type", "transparent", "char"]

    def __init__(self, tile_type: int, transparent: bool, char: str):
        self.tile_type = tile_type
        self.transparent = transparent
        self.char = char


TILE_DEFINITIONS: Dict[int, Tile] = {
    TILE_FLOOR: Tile(TILE_FLOOR, transparent=True, char="."),
    TILE_WALL: Tile(TILE_WALL, transparent=False, char="#"),
    TILE_DOOR: Tile(TILE_DOOR, transparent=True, char="+"),
    TILE_WATER: Tile(TILE_WATER, transparent=True, char="~"),
    TILE_GRASS: Tile(TILE_GRASS, transparent=True, char=","),
    TILE_TREE: Tile(TILE_TREE, transparent=False, char="T"),
}

CHAR_MAP: Dict[str, int] = {
    tile.char: tile_type for tile_type, tile in TILE_DEFINITIONS.items()
}


class GameMap:
    """A dense tile map that tracks lit and discovered tiles."""

    def __init__(self, width: int, height: int, fill: int = TILE_FLOOR):
        self.width = width
        self.height = height
        # Use numpy array for efficient storage and operations
        self.tiles = np.full((height, width), fill, dtype=np.uint8)
        # Fog of war: nothing explored or visible until FOV runs
        self.explored = np.zeros((height, width), dtype=bool)
        self.visible = np.zeros((height, width), dtype=bool)

        self.start_position: Optional[Coord] = None

        # Tiles activated since the last reset_activations()
        self.activated: Set[Coord] = set()
        self.activation_listeners: List[ActivationListener] = []

    # --- visibility capabilities ---
    def is_out_of_bounds(self, x: int, y: int) -> bool:
        return not (0 <= x < self.width and 0 <= y < self.height)

    def activate(self, x: int, y: int) -> None:
        """Notify listeners that (x, y) is in full view."""
        if self.is_out_of_bounds(x, y):
            return
        self.activated.add((x, y))
        for listener in self.activation_listeners:
            listener(x, y)

    def mark_discovered(self, x: int, y: int) -> None:
        if not self.is_out_of_bounds(x, y):
            self.explored[y, x] = True

    def set_lit(self, x: int, y: int) -> None:
        if not self.is_out_of_bounds(x, y):
            self.visible[y, x] = True

    def clear_lit(self, x: int, y: int) -> None:
        if not self.is_out_of_bounds(x, y):
            self.visible[y, x] = False

    def blocks_sight(self, x: int, y: int) -> bool:
        return not self.is_transparent(x, y)

    # --- queries ---
    def is_transparent(self, x: int, y: int) -> bool:
        """Check if a tile is transparent."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return TILE_DEFINITIONS[self.tiles[y, x]].transparent
        return False

    def is_lit(self, x: int, y: int) -> bool:
        return not self.is_out_of_bounds(x, y) and bool(self.visible[y, x])

    def is_discovered(self, x: int, y: int) -> bool:
        return not self.is_out_of_bounds(x, y) and bool(self.explored[y, x])

    def visible_tiles(self) -> Set[Coord]:
        """All currently lit tiles as (x, y) pairs."""
        return {(int(x), int(y)) for y, x in np.argwhere(self.visible)}

    def discovered_tiles(self) -> Set[Coord]:
        """All tiles discovered so far as (x, y) pairs."""
        return {(int(x), int(y)) for y, x in np.argwhere(self.explored)}

    def reset_activations(self):
        self.activated.clear()

    def set_tile(self, x: int, y: int, tile_type: int):
        """Change a tile. Do not call while a visibility refresh is running.

        Off-map writes are ignored; negative indices would wrap in numpy.
        """
        if self.is_out_of_bounds(x, y):
            logger.debug("Ignoring off-map tile write at (%d, %d)", x, y)
            return
        self.tiles[y, x] = tile_type

    def get_tile_char(self, x: int, y: int) -> str:
        if 0 <= x < self.width and 0 <= y < self.height:
            return TILE_DEFINITIONS[self.tiles[y, x]].char
        return " "

    def load_from_string(self, map_data: list[str]):
        """Load map data from a list of strings."""
        for y, row in enumerate(map_data):
            if y >= self.height:
                break
            for x, char in enumerate(row):
                if x >= self.width:
                    break

                if char == "@":
                    self.start_position = (x, y)
                    self.tiles[y, x] = TILE_FLOOR
                    continue

                # Default to floor for spaces or unknown chars
                tile_type = CHAR_MAP.get(char, TILE_FLOOR)
                self.tiles[y, x] = tile_type


def create_map_from_string(map_data: list[str]) -> GameMap:
    """Create a GameMap from a string definition."""
    if not map_data:
        return GameMap(CONFIG.map_width, CONFIG.map_height)

    height = len(map_data)
    width = max(len(row) for row in map_data)

    game_map = GameMap(width, height)
    game_map.load_from_string(map_data)
    logger.debug("Loaded %dx%d map from string", width, height)
    return game_map
