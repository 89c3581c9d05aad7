"""
Debug renderers for tile grids: plain text and images.
"""

from typing import Dict, Tuple

import cv2
import numpy as np

from .dungeon_map import DungeonTile, Grid

TILE_TO_ASCII: Dict[int, str] = {
    DungeonTile.EMPTY: ".",
    DungeonTile.WALL: "#",
    DungeonTile.DUMMY: "?",
    DungeonTile.CLOSED_DOOR: "+",
    DungeonTile.OPEN_DOOR: "'",
    DungeonTile.CHEST: "$",
    DungeonTile.KEY: "k",
}

# BGR, the channel order cv2 expects
TILE_COLORS: Dict[int, Tuple[int, int, int]] = {
    DungeonTile.EMPTY: (40, 30, 25),
    DungeonTile.WALL: (120, 120, 120),
    DungeonTile.DUMMY: (255, 0, 255),
    DungeonTile.CLOSED_DOOR: (20, 70, 140),
    DungeonTile.OPEN_DOOR: (60, 160, 220),
    DungeonTile.CHEST: (0, 200, 255),
    DungeonTile.KEY: (0, 255, 0),
}

UNKNOWN_TILE_COLOR = (0, 0, 255)


def render_ascii(grid: Grid) -> str:
    """Convert a grid indexed [x, y] to text, one line per row."""
    width, height = grid.shape
    lines = []
    for y in range(height):
        lines.append("".join(TILE_TO_ASCII.get(int(grid[x, y]), "?") for x in range(width)))
    return "\n".join(lines)


def render_image(grid: Grid, tile_size: int = 32, show_grid: bool = False) -> np.ndarray:
    """
    Paint each tile as a filled square.

    Returns:
        A BGR image of shape (height * tile_size, width * tile_size, 3)
    """
    width, height = grid.shape
    image = np.zeros((height * tile_size, width * tile_size, 3), dtype=np.uint8)

    for x in range(width):
        for y in range(height):
            color = TILE_COLORS.get(int(grid[x, y]), UNKNOWN_TILE_COLOR)
            top_left = (x * tile_size, y * tile_size)
            bottom_right = ((x + 1) * tile_size - 1, (y + 1) * tile_size - 1)
            cv2.rectangle(image, top_left, bottom_right, color, -1)

    if show_grid:
        for x in range(width + 1):
            cv2.line(image, (x * tile_size, 0), (x * tile_size, height * tile_size), (64, 64, 64), 1)
        for y in range(height + 1):
            cv2.line(image, (0, y * tile_size), (width * tile_size, y * tile_size), (64, 64, 64), 1)

    return image
