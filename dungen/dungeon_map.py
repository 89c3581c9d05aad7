"""
Rasterizes a dungeon layout into a tile grid.

The pipeline runs in a fixed order:

1. Fill the whole grid with walls
2. Carve every room
3. Carve an L-shaped corridor for every corridor, with door tiles on long runs
4. Turn walls that don't border any floor into empty space
5. Drop door tiles that aren't sitting in a one-tile gap in a wall
6. Mark item positions inside rooms

The grid is indexed [x, y].
"""

import logging
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np

from .dungeon import MIN_ROOM_SIZE, Dungeon
from .entities import Corridor, Door, Room
from .errors import LayoutError
from .random_source import RandomSource, Sampler

logger = logging.getLogger(__name__)

# Corridor runs shorter than this never get a door tile
MIN_CORRIDOR_LENGTH_FOR_DOOR = 3

# Attempts to find a free cell for each item before it is left off the map
ITEM_PLACEMENT_ATTEMPTS = 10


class DungeonTile(IntEnum):
    EMPTY = 0
    WALL = 1
    DUMMY = 2  # only exists while redundant walls are being removed
    CLOSED_DOOR = 3
    OPEN_DOOR = 4
    CHEST = 5
    KEY = 6


DOOR_TILES = (DungeonTile.CLOSED_DOOR, DungeonTile.OPEN_DOOR)
ITEM_TILES = (DungeonTile.CHEST, DungeonTile.KEY)

# Type Definition
Grid = np.ndarray


def door_tile(door: Optional[Door]) -> DungeonTile:
    """Tile for a corridor cell that may hold a door."""
    if door is None:
        return DungeonTile.EMPTY
    return DungeonTile.OPEN_DOOR if door.open else DungeonTile.CLOSED_DOOR


class DungeonMap:
    """
    Tile grid of fixed size that a finished Dungeon is drawn onto.

    Args:
        width: Number of columns (x)
        height: Number of rows (y)
        rng: Random source for corridor rows and item positions
    """

    def __init__(self, width: int, height: int, rng: Optional[Sampler] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width: int = width
        self.height: int = height
        self.rng: Sampler = rng if rng is not None else RandomSource()
        self.map: Grid = self._blank_grid()

    def _blank_grid(self) -> Grid:
        return np.full((self.width, self.height), DungeonTile.WALL, dtype=np.uint8)

    def tile_at(self, x: int, y: int) -> Optional[DungeonTile]:
        """Returns the tile at (x, y), or None outside the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return DungeonTile(int(self.map[x, y]))
        return None

    def is_wall(self, x: int, y: int) -> bool:
        """Walls, dummies, and everything outside the grid count as wall."""
        tile = self.tile_at(x, y)
        return tile is None or tile in (DungeonTile.WALL, DungeonTile.DUMMY)

    def _check_layout(self, dungeon: Dungeon) -> None:
        for room in dungeon.rooms:
            if room.width < MIN_ROOM_SIZE or room.height < MIN_ROOM_SIZE:
                raise LayoutError(f"Room {room.id} size {room.width}x{room.height} is too small to carve")
            if room.x < 0 or room.y < 0 or room.x2 > self.width or room.y2 > self.height:
                raise LayoutError(
                    f"Room {room.id} at ({room.x}, {room.y}) size {room.width}x{room.height} "
                    f"does not fit a {self.width}x{self.height} map"
                )
        for corridor in dungeon.corridors:
            for room_id in (corridor.from_room_id, corridor.to_room_id):
                if dungeon.get_room_by_id(room_id) is None:
                    raise LayoutError(f"Corridor {corridor.id} refers to unknown room {room_id}")
            _, _, end_x, _ = self._corridor_ends(
                dungeon.get_room_by_id(corridor.from_room_id),
                dungeon.get_room_by_id(corridor.to_room_id),
            )
            if end_x >= self.width:
                raise LayoutError(f"Corridor {corridor.id} runs off the right edge of the map")

    def _carve_rooms(self, dungeon: Dungeon) -> None:
        for room in dungeon.rooms:
            self.map[room.x : room.x2, room.y : room.y2] = DungeonTile.EMPTY

    @staticmethod
    def _corridor_ends(from_room: Room, to_room: Room) -> Tuple[int, Room, int, Room]:
        """
        Work out where the horizontal run of a corridor starts and ends.

        Returns (start_x, start_room, end_x, end_room); the run's first row is
        picked inside start_room and its last row inside end_room.
        """
        if from_room.x2 <= to_room.x:
            return from_room.x2, from_room, to_room.x, to_room
        return to_room.x, to_room, from_room.x2, from_room

    def _carve_corridor(self, corridor: Corridor, from_room: Room, to_room: Room) -> None:
        start_x, start_room, end_x, end_room = self._corridor_ends(from_room, to_room)

        # Random row in the wall of the starting room..
        start_y = self.rng.range(0, start_room.height) + start_room.y
        # ..and the one the corridor has to reach in the other room
        end_y = self.rng.range(0, end_room.height) + end_room.y

        corridor_x_len = end_x - start_x
        self.map[start_x : end_x + 1, start_y] = DungeonTile.EMPTY
        if corridor_x_len >= MIN_CORRIDOR_LENGTH_FOR_DOOR:
            self.map[start_x + 1, start_y] = door_tile(corridor.from_room_door)

        corridor_y_len = abs(end_y - start_y)
        step = -1 if start_y >= end_y else 1
        self.map[end_x, min(start_y, end_y) : max(start_y, end_y) + 1] = DungeonTile.EMPTY
        if corridor_y_len >= MIN_CORRIDOR_LENGTH_FOR_DOOR:
            door_y = start_y + (corridor_y_len - 2) * step
            self.map[end_x, door_y] = door_tile(corridor.to_room_door)

    def _carve_corridors(self, dungeon: Dungeon) -> None:
        for corridor in dungeon.corridors:
            from_room = dungeon.get_room_by_id(corridor.from_room_id)
            to_room = dungeon.get_room_by_id(corridor.to_room_id)
            self._carve_corridor(corridor, from_room, to_room)

    def _wall_mask(self) -> np.ndarray:
        return (self.map == DungeonTile.WALL) | (self.map == DungeonTile.DUMMY)

    def remove_redundant_walls(self) -> None:
        """
        Open up every wall whose whole 3x3 neighbourhood is wall.

        Walls are first marked DUMMY against the grid as it was before the
        pass, then every DUMMY becomes EMPTY. Only a one tile shell of wall
        around floor is left.
        """
        walls = np.pad(self._wall_mask(), 1, constant_values=True)
        surrounded = np.ones((self.width, self.height), dtype=bool)
        for dx in range(3):
            for dy in range(3):
                surrounded &= walls[dx : dx + self.width, dy : dy + self.height]

        self.map[surrounded & (self.map == DungeonTile.WALL)] = DungeonTile.DUMMY
        self.map[self.map == DungeonTile.DUMMY] = DungeonTile.EMPTY

    def is_valid_door_position(self, x: int, y: int) -> bool:
        """A door must sit between two walls with open space on the other two sides."""
        horizontal_gap = (
            self.is_wall(x, y - 1)
            and self.is_wall(x, y + 1)
            and not self.is_wall(x - 1, y)
            and not self.is_wall(x + 1, y)
        )
        vertical_gap = (
            self.is_wall(x - 1, y)
            and self.is_wall(x + 1, y)
            and not self.is_wall(x, y - 1)
            and not self.is_wall(x, y + 1)
        )
        return horizontal_gap or vertical_gap

    def remove_invalid_doors(self) -> None:
        doors = np.argwhere(np.isin(self.map, DOOR_TILES))
        for x, y in doors:
            if not self.is_valid_door_position(int(x), int(y)):
                logger.debug("Removing stranded door at (%d, %d)", x, y)
                self.map[x, y] = DungeonTile.EMPTY

    def _place_items(self, dungeon: Dungeon) -> None:
        for room in dungeon.rooms:
            for item in room.items:
                for _ in range(ITEM_PLACEMENT_ATTEMPTS):
                    x = self.rng.range(room.x, room.x2)
                    y = self.rng.range(room.y, room.y2)
                    if self.map[x, y] not in ITEM_TILES:
                        self.map[x, y] = DungeonTile.KEY if item.item_type.is_key else DungeonTile.CHEST
                        break
                else:
                    logger.debug("Item %d left off the map, room %d is too crowded", item.id, room.id)

    def create_map(self, dungeon: Dungeon) -> Grid:
        """
        Draws the dungeon onto a fresh grid.

        Returns:
            A read-only view of the grid, shape (width, height), indexed [x, y].

        Raises:
            LayoutError: a room doesn't fit the map or a corridor names an
                unknown room
        """
        self._check_layout(dungeon)

        self.map = self._blank_grid()
        self._carve_rooms(dungeon)
        self._carve_corridors(dungeon)
        self.remove_redundant_walls()
        self.remove_invalid_doors()
        self._place_items(dungeon)

        view = self.map.view()
        view.flags.writeable = False
        return view
