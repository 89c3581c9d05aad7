#!/usr/bin/env python3
"""
Render a generated dungeon as ASCII art for debugging.

Usage:
    uv run tools/render_dungeon_ascii.py [--rooms N] [--type T] [--seed S]
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path so we can import dungen
sys.path.insert(0, str(Path(__file__).parent.parent))

from dungen import DungeonConfig, DungeonType, GenerationError, build_dungeon
from dungen.render import render_ascii


def main():
    parser = argparse.ArgumentParser(description="Render dungeon as ASCII art")
    parser.add_argument("--rooms", type=int, default=10, help="Number of rooms to try to place")
    parser.add_argument(
        "--type",
        choices=[t.name.lower() for t in DungeonType],
        default="separate_rooms",
        help="Room placement strategy",
    )
    parser.add_argument("--width", type=int, default=60, help="Dungeon width in tiles")
    parser.add_argument("--height", type=int, default=30, help="Dungeon height in tiles")
    parser.add_argument("--room-width", type=int, default=8, help="Max room width")
    parser.add_argument("--room-height", type=int, default=6, help="Max room height")
    parser.add_argument("--no-keys", action="store_true", help="Don't drop keys")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    args = parser.parse_args()

    config = DungeonConfig(
        max_rooms=args.rooms,
        dungeon_type=DungeonType[args.type.upper()],
        width=args.width,
        height=args.height,
        max_room_width=args.room_width,
        max_room_height=args.room_height,
        keys=not args.no_keys,
        seed=args.seed,
    )

    try:
        dungeon, grid = build_dungeon(config)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(render_ascii(grid))

    # Print some debug info
    print(f"\n--- Debug Info ---")
    print(f"Seed: {dungeon.rng.seed}")
    print(f"Map size: {config.width}x{config.height} tiles")
    print(f"Rooms generated: {dungeon.get_rooms_number()} of {config.max_rooms}")
    print(f"Corridors: {dungeon.get_corridors_number()}, doors: {dungeon.get_doors_number()}")


if __name__ == "__main__":
    main()
