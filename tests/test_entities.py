"""Tests for the layout records."""

import pytest

from dungen.entities import ARMOR, LOOT_TYPES, POTION, WEAPON, Corridor, Door, ItemKind, ItemType, Room


class TestRoomOverlap:
    def test_separate_rooms(self):
        assert not Room(0, 0, 0, 3, 3).overlaps(Room(1, 10, 10, 3, 3))

    def test_touching_edges_count_as_overlap(self):
        """x2 is one past the last floor column, so a room starting there still overlaps."""
        left = Room(0, 0, 0, 3, 3)
        assert left.overlaps(Room(1, 3, 0, 3, 3))
        assert left.overlaps(Room(1, 0, 3, 3, 3))
        assert not left.overlaps(Room(1, 4, 0, 3, 3))

    def test_height_is_measured_from_y(self):
        """A room far below a wide room must not be reported as overlapping."""
        wide = Room(0, 20, 0, 10, 3)
        below = Room(1, 20, 10, 3, 3)
        assert not wide.overlaps(below)
        assert not below.overlaps(wide)

    @pytest.mark.parametrize("other", [
        Room(1, 1, 1, 1, 1),
        Room(1, -5, -5, 20, 20),
        Room(1, 2, -3, 2, 10),
    ])
    def test_overlap_is_symmetric(self, other):
        room = Room(0, 0, 0, 4, 4)
        assert room.overlaps(other)
        assert other.overlaps(room)

    def test_far_edges(self):
        room = Room(0, 2, 3, 4, 5)
        assert (room.x2, room.y2) == (6, 8)
        assert room.items == []


class TestItemType:
    def test_key_carries_door_id(self):
        key = ItemType.key(4)
        assert key.kind is ItemKind.KEY
        assert key.door_id == 4
        assert key.is_key

    def test_default_key_is_universal(self):
        assert ItemType.key() == ItemType(ItemKind.KEY, 0)

    def test_loot_types(self):
        assert LOOT_TYPES == (WEAPON, ARMOR, POTION)
        assert not any(t.is_key for t in LOOT_TYPES)


class TestCorridor:
    def test_doors_lists_present_slots(self):
        corridor = Corridor(0, 1, 2)
        assert corridor.doors() == []
        corridor.to_room_door = Door(5)
        assert corridor.doors() == [Door(5)]
        corridor.from_room_door = Door(4)
        assert [d.id for d in corridor.doors()] == [4, 5]

    def test_touches(self):
        corridor = Corridor(0, 1, 2)
        assert corridor.touches(1) and corridor.touches(2)
        assert not corridor.touches(3)
