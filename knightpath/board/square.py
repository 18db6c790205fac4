"""
Board value types for the knight search.
"""

from __future__ import annotations

from dataclasses import dataclass

# All 8 possible (dx, dy) jumps for a knight
KNIGHT_MOVES: tuple[tuple[int, int], ...] = (
    (2, -1),
    (2, 1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


@dataclass(frozen=True)
class Square:
    """
    A board cell.

    Attributes:
        x: Column (file), 0-indexed
        y: Row (rank), 0-indexed
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Square:
        """Return the square shifted by (dx, dy)."""
        return Square(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class SearchNode:
    """
    A square reached during the search.

    Attributes:
        square: The board cell
        distance: Number of knight moves from the source
    """

    square: Square
    distance: int = 0


def is_within_board(square: Square, board_size: int) -> bool:
    """Check if the square lies on a board_size x board_size board."""
    return 0 <= square.x < board_size and 0 <= square.y < board_size
