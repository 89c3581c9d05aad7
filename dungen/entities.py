"""
Plain records that make up a dungeon layout.

Rooms own their items, corridors own their doors, and corridors point at
rooms by id rather than by reference.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class ItemKind(Enum):
    """The kinds of item that can be dropped into a room."""

    KEY = auto()
    WEAPON = auto()
    ARMOR = auto()
    POTION = auto()


@dataclass(frozen=True)
class ItemType:
    """
    An item kind plus its payload.

    Only keys carry a payload: the id of the door they open. Keys are not
    bound to a particular door yet, so the generator always stores 0 there.
    """

    kind: ItemKind
    door_id: int = 0

    @classmethod
    def key(cls, door_id: int = 0) -> "ItemType":
        return cls(ItemKind.KEY, door_id)

    @property
    def is_key(self) -> bool:
        return self.kind is ItemKind.KEY


WEAPON = ItemType(ItemKind.WEAPON)
ARMOR = ItemType(ItemKind.ARMOR)
POTION = ItemType(ItemKind.POTION)

# Item types that fill rooms besides keys, in draw order
LOOT_TYPES = (WEAPON, ARMOR, POTION)


@dataclass
class Item:
    id: int
    item_type: ItemType
    description: str


@dataclass
class Door:
    id: int
    locked: bool = False
    open: bool = False


@dataclass
class Room:
    """An axis-aligned rectangle of floor, positioned by its top-left corner."""

    id: int
    x: int
    y: int
    width: int
    height: int
    items: List[Item] = field(default_factory=list)

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    def overlaps(self, other: "Room") -> bool:
        """
        Check whether two rooms overlap, counting touching edges as overlap.

        The comparison is inclusive on all four edges, so rooms that merely
        share an edge are rejected too and always end up with a gap.
        """
        return (
            self.x <= other.x2
            and self.x2 >= other.x
            and self.y <= other.y2
            and self.y2 >= other.y
        )


@dataclass
class Corridor:
    """A connection between two rooms with an optional door at either end."""

    id: int
    from_room_id: int
    to_room_id: int
    from_room_door: Optional[Door] = None
    to_room_door: Optional[Door] = None

    def doors(self) -> List[Door]:
        """Returns the doors that are present, from-side first."""
        return [d for d in (self.from_room_door, self.to_room_door) if d is not None]

    def touches(self, room_id: int) -> bool:
        return self.from_room_id == room_id or self.to_room_id == room_id
