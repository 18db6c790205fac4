"""
Errors raised by the knight path search.

Both failure kinds derive from SearchError so callers can catch them
together. Neither is ever recovered inside the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from knightpath.board.square import Square


class SearchError(Exception):
    """Base class for knight path search failures."""


class InvalidSquareError(SearchError, ValueError):
    """A square lies outside [0, board_size) on either axis."""

    def __init__(self, square: Square, board_size: int) -> None:
        self.square = square
        self.board_size = board_size
        super().__init__(
            f"Square ({square.x}, {square.y}) is outside the "
            f"{board_size}x{board_size} board"
        )


class PathNotFoundError(SearchError):
    """The knight-move graph does not connect source to destination."""

    def __init__(self, source: Square, destination: Square, board_size: int) -> None:
        self.source = source
        self.destination = destination
        self.board_size = board_size
        super().__init__(
            f"No knight path from ({source.x}, {source.y}) to "
            f"({destination.x}, {destination.y}) on a "
            f"{board_size}x{board_size} board"
        )
