#!/usr/bin/env python3
"""
Knight Path CLI - Minimum knight moves between two squares.

Usage:
    python scripts/find_path.py
    python scripts/find_path.py --source a1 --target h8
    python scripts/find_path.py --source 0,0 --target 2,2 --board-size 4 --map
    python scripts/find_path.py --source 0,0 --target 1,1 --board-size 3 -v

Squares:
    Either "x,y" coordinates (0-indexed) or algebraic notation ("a1" = 0,0).

Exit codes:
    0 - path found
    1 - no path exists on this board
    2 - invalid square
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from knightpath import config  # noqa: E402
from knightpath.board import Square, parse_square  # noqa: E402
from knightpath.errors import InvalidSquareError, PathNotFoundError  # noqa: E402
from knightpath.search import KnightPathFinder  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the minimum number of knight moves between two squares",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--source",
        type=str,
        default="{},{}".format(*config.DEFAULT_SOURCE),
        help="Starting square (default: %(default)s)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default="{},{}".format(*config.DEFAULT_TARGET),
        help="Destination square (default: %(default)s)",
    )
    parser.add_argument(
        "--board-size",
        type=int,
        default=config.DEFAULT_BOARD_SIZE,
        help="Side length of the board (default: %(default)s)",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Also print the distance from source to every square",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_distance_map(finder: KnightPathFinder, source: Square) -> None:
    """Print the board of distances from source, highest rank first."""
    distances = finder.distance_map(source)
    size = finder.board_size
    width = max(2, len(str(distances.max())))

    print(f"\nDistances from {source}:")
    for y in reversed(range(size)):
        cells = []
        for x in range(size):
            value = distances[x, y]
            cells.append(("." if value == config.UNREACHABLE else str(value)).rjust(width))
        print(f"  {y:>3} |" + " ".join(cells))
    print("      " + " ".join(str(x).rjust(width) for x in range(size)))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        source = parse_square(args.source)
        target = parse_square(args.target)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    finder = KnightPathFinder(args.board_size)

    try:
        steps = finder.find_shortest_path(source, target)
    except InvalidSquareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PathNotFoundError as e:
        print(f"Shortest path not found: {e}")
        return 1

    print(f"Minimum number of steps required is {steps}.")

    if args.map:
        print_distance_map(finder, source)

    return 0


if __name__ == "__main__":
    sys.exit(main())
