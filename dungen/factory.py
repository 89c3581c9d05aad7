"""
Factory for building a complete dungeon in one call.
"""

import logging
from typing import Optional, Tuple

from .config import DungeonConfig
from .dungeon import Dungeon
from .dungeon_map import DungeonMap, Grid
from .errors import SingleRoomLayout
from .random_source import RandomSource, Sampler

logger = logging.getLogger(__name__)


def build_dungeon(
    config: DungeonConfig,
    rng: Optional[Sampler] = None,
) -> Tuple[Dungeon, Grid]:
    """
    Generate a layout and rasterize it.

    Parameters:
        config: Generation parameters
        rng: Random source shared by every stage. When None, one is created
             from config.seed.

    Returns:
        dungeon: The generated layout
        grid: Its tile grid, sized config.width x config.height
    """
    if rng is None:
        rng = RandomSource(config.seed)

    dungeon = Dungeon(rng).generate(
        config.max_rooms,
        config.dungeon_type,
        config.width,
        config.height,
        config.max_room_width,
        config.max_room_height,
    )

    if config.doors:
        try:
            dungeon.add_doors()
        except SingleRoomLayout:
            logger.info("Single room dungeon, skipping doors")

    if config.items:
        dungeon.add_items(config.keys)

    grid = DungeonMap(config.width, config.height, rng).create_map(dungeon)
    return dungeon, grid
