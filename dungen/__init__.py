"""Dungeon layout generation and rasterization."""

from dungen.config import DungeonConfig
from dungen.dungeon import Dungeon, DungeonType
from dungen.dungeon_map import DungeonMap, DungeonTile, Grid
from dungen.entities import (
    ARMOR,
    POTION,
    WEAPON,
    Corridor,
    Door,
    Item,
    ItemKind,
    ItemType,
    Room,
)
from dungen.errors import (
    DungenError,
    GenerationError,
    InvalidRoomCount,
    LayoutError,
    RoomTooLargeForDungeon,
    RoomTooSmall,
    SingleRoomLayout,
)
from dungen.factory import build_dungeon
from dungen.random_source import RandomSource, Sampler
