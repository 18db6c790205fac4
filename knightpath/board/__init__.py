"""
Board module.

Provides the chessboard value types and square notation:
- Square: Immutable (x, y) board coordinate
- SearchNode: Square plus its distance from the search source
- KNIGHT_MOVES: The 8 knight jump offsets
- parse_square / to_algebraic: Text conversion for squares
"""

from knightpath.board.notation import parse_square, to_algebraic
from knightpath.board.square import KNIGHT_MOVES, SearchNode, Square, is_within_board

__all__ = [
    "KNIGHT_MOVES",
    "SearchNode",
    "Square",
    "is_within_board",
    "parse_square",
    "to_algebraic",
]
