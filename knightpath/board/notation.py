"""
Text notation for board squares.

Two forms are understood:
    "3,4"  - plain x,y coordinates
    "d5"   - algebraic notation (file letter -> x, rank number -> y)
"""

from __future__ import annotations

import re
import string

from knightpath.board.square import Square

_COORDINATE_PATTERN = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")
_ALGEBRAIC_PATTERN = re.compile(r"^\s*([a-zA-Z])(\d+)\s*$")

FILES = string.ascii_lowercase


def parse_square(text: str) -> Square:
    """
    Parse a square from "x,y" or algebraic notation.

    Bounds are not checked here; the finder validates squares against
    the board it searches.

    Args:
        text: Square description, e.g. "0,0" or "a1"

    Returns:
        The parsed Square

    Raises:
        ValueError: If text is in neither format
    """
    match = _COORDINATE_PATTERN.match(text)
    if match:
        return Square(int(match.group(1)), int(match.group(2)))

    match = _ALGEBRAIC_PATTERN.match(text)
    if match:
        rank = int(match.group(2))
        if rank < 1:
            raise ValueError(f"Invalid rank in square '{text}'")
        return Square(FILES.index(match.group(1).lower()), rank - 1)

    raise ValueError(f"Cannot parse square '{text}' (expected 'x,y' or e.g. 'a1')")


def to_algebraic(square: Square) -> str:
    """Format a square as algebraic notation (Square(0, 0) -> 'a1')."""
    if not 0 <= square.x < len(FILES) or square.y < 0:
        raise ValueError(f"Square {square} has no algebraic name")
    return f"{FILES[square.x]}{square.y + 1}"
