"""Parameters for building a dungeon in one call."""

from dataclasses import dataclass
from typing import Optional

from .dungeon import DungeonType, check_generation_params


@dataclass
class DungeonConfig:
    """Everything needed to build and rasterize one dungeon."""

    max_rooms: int = 5
    dungeon_type: DungeonType = DungeonType.SEPARATE_ROOMS
    width: int = 25
    height: int = 25
    max_room_width: int = 4
    max_room_height: int = 4
    doors: bool = True
    items: bool = True
    keys: bool = True
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raises the GenerationError that generate() would raise for these values."""
        check_generation_params(
            self.max_rooms, self.width, self.height, self.max_room_width, self.max_room_height
        )

