"""
Dungeon Layout Algorithm
========================

We build an abstract layout of rooms and corridors; nothing is drawn here.

1. Place rooms according to the dungeon type:
   - BASEMENT and SEPARATE_ROOMS scatter rooms at random positions, retrying
     a bounded number of times when a candidate overlaps an existing room.
     SEPARATE_ROOMS tests a candidate grown towards the top-left so rooms
     keep some distance from each other.
   - GRID splits the dungeon into cells of the maximum room size and puts
     one room in each randomly chosen cell.
2. Connect rooms with corridors:
   - BASEMENT links every room to some other random room. Rooms may end up
     disconnected from each other.
   - SEPARATE_ROOMS and GRID link rooms in creation order, forming a path.
3. Optionally put doors at the ends of corridors.
4. Optionally drop items (keys and loot) into random rooms.

Running out of attempts is not an error: the layout just ends up sparser
than requested.
"""

import logging
from enum import Enum, auto
from typing import List, Optional, Set, Tuple

from .entities import LOOT_TYPES, Corridor, Door, Item, ItemType, Room
from .errors import (
    InvalidRoomCount,
    RoomTooLargeForDungeon,
    RoomTooSmall,
    SingleRoomLayout,
)
from .random_source import RandomSource, Sampler

logger = logging.getLogger(__name__)

# Attempts per room slot (or grid cell) before the slot is abandoned
PLACEMENT_ATTEMPTS = 10

# Extra room kept free above and left of each SEPARATE_ROOMS candidate
SPACE_BETWEEN_ROOMS = 3

# Smallest room on either axis
MIN_ROOM_SIZE = 2

# Smallest allowed max room size on either axis
MIN_MAX_ROOM_SIZE = 3

# Percent chances used by add_doors
DOOR_CREATION_CHANCE = 75
DOORS_ON_BOTH_SIDES_CHANCE = 40


class DungeonType(Enum):
    """Room placement and connection strategies."""

    BASEMENT = auto()  # one big basement with many walls and corridors
    SEPARATE_ROOMS = auto()  # classic dungeon with spaced out rooms
    GRID = auto()  # rooms aligned to a grid


def check_generation_params(
    max_rooms: int,
    dungeon_width: int,
    dungeon_height: int,
    max_room_width: int,
    max_room_height: int,
) -> None:
    """Raises the matching GenerationError if the parameters are unusable."""
    if max_rooms == 0:
        raise InvalidRoomCount("Rooms number must not be zero")
    if max_room_width >= dungeon_width - 2 or max_room_height >= dungeon_height - 2:
        raise RoomTooLargeForDungeon(
            f"Room size {max_room_width}x{max_room_height} does not fit "
            f"dungeon size {dungeon_width}x{dungeon_height}"
        )
    if max_room_width < MIN_MAX_ROOM_SIZE or max_room_height < MIN_MAX_ROOM_SIZE:
        raise RoomTooSmall(
            f"Room size {max_room_width}x{max_room_height} is less than "
            f"{MIN_MAX_ROOM_SIZE} on some axis"
        )


def _grid_span(cells: int) -> Tuple[int, int]:
    """Range of cell indices to sample from, skipping the border when possible."""
    if cells > 2:
        return 1, cells - 1
    return 0, cells


class Dungeon:
    """
    Owns the rooms and corridors of one layout.

    All randomness comes from `rng`, so two dungeons driven by random sources
    with the same seed end up identical.
    """

    def __init__(self, rng: Optional[Sampler] = None) -> None:
        self.rng: Sampler = rng if rng is not None else RandomSource()
        self.rooms: List[Room] = []
        self.corridors: List[Corridor] = []

        self._next_room_id = 0
        self._next_corridor_id = 0
        self._next_door_id = 0
        self._next_item_id = 0

    # Accessors

    def get_rooms_number(self) -> int:
        return len(self.rooms)

    def get_corridors_number(self) -> int:
        return len(self.corridors)

    def get_room(self, room_idx: int) -> Optional[Room]:
        """Gets a room by its index in creation order."""
        if 0 <= room_idx < len(self.rooms):
            return self.rooms[room_idx]
        return None

    def get_room_by_id(self, room_id: int) -> Optional[Room]:
        return next((r for r in self.rooms if r.id == room_id), None)

    def get_corridor(self, corridor_idx: int) -> Optional[Corridor]:
        if 0 <= corridor_idx < len(self.corridors):
            return self.corridors[corridor_idx]
        return None

    def get_doors_number(self) -> int:
        """Counts the door slots that hold a door, over all corridors."""
        return sum(len(c.doors()) for c in self.corridors)

    def get_room_corridors(self, room_id: int) -> List[Corridor]:
        """Gets all corridors that start or end in the given room."""
        return [c for c in self.corridors if c.touches(room_id)]

    # Manual construction

    def add_room(self, x: int, y: int, width: int, height: int) -> Room:
        """Adds a room with the next free id. No overlap check is done."""
        if width < MIN_ROOM_SIZE or height < MIN_ROOM_SIZE:
            raise ValueError(f"Room size {width}x{height} is less than {MIN_ROOM_SIZE} on some axis")
        room = Room(self._next_room_id, x, y, width, height)
        self._next_room_id += 1
        self.rooms.append(room)
        return room

    def add_corridor(self, from_room_id: int, to_room_id: int) -> Corridor:
        """Adds a corridor between two existing, distinct rooms."""
        if from_room_id == to_room_id:
            raise ValueError(f"Corridor cannot connect room {from_room_id} to itself")
        for room_id in (from_room_id, to_room_id):
            if self.get_room_by_id(room_id) is None:
                raise ValueError(f"Unknown room id {room_id}")
        corridor = Corridor(self._next_corridor_id, from_room_id, to_room_id)
        self._next_corridor_id += 1
        self.corridors.append(corridor)
        return corridor

    # Generation

    def _overlaps_existing_room(self, candidate: Room) -> bool:
        return any(candidate.overlaps(r) for r in self.rooms)

    def _place_scattered_rooms(
        self,
        max_rooms: int,
        dungeon_type: DungeonType,
        dungeon_width: int,
        dungeon_height: int,
        max_room_width: int,
        max_room_height: int,
    ) -> None:
        for slot in range(max_rooms):
            for _ in range(PLACEMENT_ATTEMPTS):
                x = self.rng.range(1, dungeon_width - max_room_width - 1)
                y = self.rng.range(1, dungeon_height - max_room_height - 1)
                w = self.rng.range(2, max_room_width)
                h = self.rng.range(2, max_room_height)

                probe = Room(self._next_room_id, x, y, w, h)
                if (
                    dungeon_type is DungeonType.SEPARATE_ROOMS
                    and x - SPACE_BETWEEN_ROOMS >= 0
                    and y - SPACE_BETWEEN_ROOMS >= 0
                ):
                    probe = Room(
                        self._next_room_id,
                        x - SPACE_BETWEEN_ROOMS,
                        y - SPACE_BETWEEN_ROOMS,
                        w + SPACE_BETWEEN_ROOMS,
                        h + SPACE_BETWEEN_ROOMS,
                    )

                if not self._overlaps_existing_room(probe):
                    # Commit the real geometry, not the spaced-out probe
                    self.add_room(x, y, w, h)
                    break
            else:
                logger.debug("Room slot %d skipped after %d attempts", slot, PLACEMENT_ATTEMPTS)

    def _place_grid_rooms(
        self,
        max_rooms: int,
        dungeon_width: int,
        dungeon_height: int,
        max_room_width: int,
        max_room_height: int,
    ) -> None:
        grid_rows = dungeon_height // max_room_height
        grid_columns = dungeon_width // max_room_width
        row_low, row_high = _grid_span(grid_rows)
        column_low, column_high = _grid_span(grid_columns)

        chosen: Set[Tuple[int, int]] = set()
        for slot in range(max_rooms):
            for _ in range(PLACEMENT_ATTEMPTS):
                row = self.rng.range(row_low, row_high)
                column = self.rng.range(column_low, column_high)
                if (row, column) not in chosen:
                    chosen.add((row, column))
                    break
            else:
                logger.debug("Grid slot %d skipped after %d attempts", slot, PLACEMENT_ATTEMPTS)

        for row, column in sorted(chosen):
            self.add_room(
                column * max_room_width,
                row * max_room_height,
                max_room_width - 1,
                max_room_height - 1,
            )

    def _connect_random_pairs(self) -> None:
        rooms_number = len(self.rooms)
        for room in list(self.rooms):
            while True:
                other = self.rooms[self.rng.range(0, rooms_number)]
                if other.id != room.id:
                    break
            self.add_corridor(room.id, other.id)

    def _connect_in_order(self) -> None:
        rooms = list(self.rooms)
        for first, second in zip(rooms, rooms[1:]):
            self.add_corridor(first.id, second.id)

    def generate(
        self,
        max_rooms: int,
        dungeon_type: DungeonType,
        dungeon_width: int,
        dungeon_height: int,
        max_room_width: int,
        max_room_height: int,
    ) -> "Dungeon":
        """
        Generates rooms and corridors.

        Calling this twice adds to the existing layout rather than replacing
        it. Fewer rooms than requested may be placed.

        Parameters:
            max_rooms: Number of rooms to try to place
            dungeon_type: Placement and connection strategy
            dungeon_width: Dungeon width in grid units
            dungeon_height: Dungeon height in grid units
            max_room_width: Max room width in grid units
            max_room_height: Max room height in grid units

        Returns:
            This dungeon, to allow chaining.

        Raises:
            InvalidRoomCount: max_rooms is zero
            RoomTooLargeForDungeon: a room of max size leaves no margin
            RoomTooSmall: max room size is below three on some axis
        """
        check_generation_params(
            max_rooms, dungeon_width, dungeon_height, max_room_width, max_room_height
        )

        if dungeon_type is DungeonType.GRID:
            self._place_grid_rooms(
                max_rooms, dungeon_width, dungeon_height, max_room_width, max_room_height
            )
        else:
            self._place_scattered_rooms(
                max_rooms,
                dungeon_type,
                dungeon_width,
                dungeon_height,
                max_room_width,
                max_room_height,
            )

        if max_rooms > 1 and len(self.rooms) > 1:
            if dungeon_type is DungeonType.BASEMENT:
                self._connect_random_pairs()
            else:
                self._connect_in_order()

        logger.info(
            "Generated %s dungeon: %d of %d rooms, %d corridors",
            dungeon_type.name,
            len(self.rooms),
            max_rooms,
            len(self.corridors),
        )
        return self

    def _new_door(self, open_state: bool) -> Door:
        door = Door(self._next_door_id, locked=False, open=open_state)
        self._next_door_id += 1
        return door

    def add_doors(self) -> None:
        """
        Randomly puts doors at corridor ends. Call after generate().

        Each corridor gets a door with a 75% chance; a door that was placed
        gets a partner at the other end with a 40% chance. The partner on the
        from-side is allocated its id first and starts closed.

        Raises:
            SingleRoomLayout: the layout has exactly one room
        """
        if len(self.rooms) == 1:
            raise SingleRoomLayout("There's only one room in the dungeon, no door is needed")

        for corridor in self.corridors:
            if self.rng.range_inclusive(1, 100) > DOOR_CREATION_CHANCE:
                continue
            open_state = self.rng.range(0, 100) > 50
            if self.rng.range_inclusive(1, 100) <= DOORS_ON_BOTH_SIDES_CHANCE:
                corridor.from_room_door = self._new_door(False)
            corridor.to_room_door = self._new_door(open_state)

        logger.debug("Placed %d doors on %d corridors", self.get_doors_number(), len(self.corridors))

    def _new_item(self, item_type: ItemType, description: Optional[str] = None) -> Item:
        item = Item(self._next_item_id, item_type, description or f"Item: {self._next_item_id}")
        self._next_item_id += 1
        return item

    def _drop_into_random_room(self, item: Item) -> None:
        room = self.rooms[self.rng.range(0, len(self.rooms))]
        room.items.append(item)

    def add_items(self, include_keys: bool) -> None:
        """
        Populates rooms with items.

        With include_keys, one key per existing door is dropped into random
        rooms. Any key opens any door for now. Then either rooms_number or
        rooms_number + 1 loot items are spread over random rooms.
        """
        if not self.rooms:
            logger.debug("No rooms to put items into")
            return

        rooms_number = len(self.rooms)
        doors_number = self.get_doors_number()

        if include_keys and doors_number > 0:
            for _ in range(doors_number):
                self._drop_into_random_room(self._new_item(ItemType.key(0), "Universal Key"))

        items_to_generate = self.rng.range(rooms_number, rooms_number + 2)
        for _ in range(items_to_generate):
            item_type = LOOT_TYPES[self.rng.range(0, len(LOOT_TYPES))]
            self._drop_into_random_room(self._new_item(item_type))
