#!/usr/bin/env python3
"""
Render a dungeon to an image file for visual inspection.

Useful for:
- Checking room placement strategies side by side
- Verifying wall pruning and door placement
- Debugging dungeon generation

Usage:
    uv run tools/render_dungeon_image.py                    # Default: 5 rooms, random seed
    uv run tools/render_dungeon_image.py --rooms 10         # 10 rooms
    uv run tools/render_dungeon_image.py --seed 42          # Reproducible dungeon
    uv run tools/render_dungeon_image.py --output my.png    # Custom output path
"""

import argparse
import cv2
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dungen import DungeonConfig, DungeonType, GenerationError, build_dungeon
from dungen.render import render_image


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a dungeon to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--rooms", "-r",
        type=int,
        default=5,
        help="Number of rooms to generate (default: 5)",
    )
    parser.add_argument(
        "--type", "-t",
        choices=[t.name.lower() for t in DungeonType],
        default="separate_rooms",
        help="Room placement strategy (default: separate_rooms)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=25,
        help="Dungeon width and height in tiles (default: 25)",
    )
    parser.add_argument(
        "--room-size",
        type=int,
        default=4,
        help="Max room width and height in tiles (default: 4)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible dungeons",
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        default=32,
        help="Tile size in pixels (default: 32)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="dungeon_render.png",
        help="Output image path (default: dungeon_render.png)",
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Overlay a tile grid on the image",
    )

    args = parser.parse_args()

    config = DungeonConfig(
        max_rooms=args.rooms,
        dungeon_type=DungeonType[args.type.upper()],
        width=args.size,
        height=args.size,
        max_room_width=args.room_size,
        max_room_height=args.room_size,
        seed=args.seed,
    )

    print(f"Generating {args.type} dungeon with {args.rooms} rooms...")
    try:
        dungeon, grid = build_dungeon(config)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Using random seed: {dungeon.rng.seed}")

    print("Rendering tiles...")
    image = render_image(grid, tile_size=args.tile_size, show_grid=args.show_grid)

    # Save image
    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    print(f"Saved to: {output_path.absolute()}")

    # Print room info
    print(f"\nRooms ({dungeon.get_rooms_number()}):")
    for room in dungeon.rooms:
        corridors = dungeon.get_room_corridors(room.id)
        print(
            f"  Room {room.id}: tile ({room.x}, {room.y}), size {room.width}x{room.height}, "
            f"{len(room.items)} items, {len(corridors)} corridors"
        )


if __name__ == "__main__":
    main()
