"""
Breadth-first search for the shortest knight path.

The search explores squares in order of distance from the source, so the
first time the destination leaves the frontier its distance is minimal.

Usage:
    from knightpath.board import Square
    from knightpath.search import find_shortest_path

    find_shortest_path(Square(0, 0), Square(7, 0))  # 5
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from knightpath.board.square import KNIGHT_MOVES, SearchNode, Square, is_within_board
from knightpath.config import DEFAULT_BOARD_SIZE, UNREACHABLE
from knightpath.errors import InvalidSquareError, PathNotFoundError
from knightpath.search.queue import FifoQueue

logger = logging.getLogger(__name__)


class KnightPathFinder:
    """
    Shortest knight path search on a board_size x board_size board.

    The finder only stores the board size. Every search builds its own
    frontier and visited set, so one instance can be shared freely.
    """

    def __init__(self, board_size: int = DEFAULT_BOARD_SIZE) -> None:
        """
        Initialize the finder.

        Args:
            board_size: Side length N of the board (squares are 0..N-1 on each axis)
        """
        self._board_size = board_size

    @property
    def board_size(self) -> int:
        return self._board_size

    def _validate(self, square: Square) -> None:
        if not is_within_board(square, self._board_size):
            raise InvalidSquareError(square, self._board_size)

    def neighbors(self, square: Square) -> Iterator[Square]:
        """Yield the on-board squares one knight move away."""
        for dx, dy in KNIGHT_MOVES:
            candidate = square.offset(dx, dy)
            if is_within_board(candidate, self._board_size):
                yield candidate

    def _expand(self, node: SearchNode, frontier: FifoQueue[SearchNode]) -> None:
        # Visited squares are filtered on dequeue, not here
        for candidate in self.neighbors(node.square):
            frontier.enqueue(SearchNode(candidate, node.distance + 1))

    def find_shortest_path(self, source: Square, destination: Square) -> int:
        """
        Find the minimum number of knight moves from source to destination.

        Args:
            source: Starting square
            destination: Square to reach

        Returns:
            Number of moves (0 if source == destination)

        Raises:
            InvalidSquareError: If either square is off the board
            PathNotFoundError: If destination is unreachable from source
        """
        self._validate(source)
        self._validate(destination)

        logger.debug(
            f"Searching {source} -> {destination} on "
            f"{self._board_size}x{self._board_size} board"
        )

        visited: set[Square] = set()
        frontier: FifoQueue[SearchNode] = FifoQueue([SearchNode(source, 0)])

        while frontier:
            node = frontier.dequeue()

            if node.square == destination:
                logger.debug(
                    f"Reached {destination} in {node.distance} moves "
                    f"({len(visited)} squares expanded)"
                )
                return node.distance

            if node.square in visited:
                continue

            visited.add(node.square)
            self._expand(node, frontier)

        logger.warning(
            f"No path from {source} to {destination} "
            f"({len(visited)} squares reachable)"
        )
        raise PathNotFoundError(source, destination, self._board_size)

    def distance_map(self, source: Square) -> np.ndarray:
        """
        Compute the knight distance from source to every square.

        Args:
            source: Starting square

        Returns:
            Integer array of shape (N, N) indexed [x, y]. Squares in another
            component of the knight graph hold UNREACHABLE.

        Raises:
            InvalidSquareError: If source is off the board
        """
        self._validate(source)

        distances = np.full((self._board_size, self._board_size), UNREACHABLE, dtype=int)
        visited: set[Square] = set()
        frontier: FifoQueue[SearchNode] = FifoQueue([SearchNode(source, 0)])

        while frontier:
            node = frontier.dequeue()
            if node.square in visited:
                continue

            visited.add(node.square)
            distances[node.square.x, node.square.y] = node.distance
            self._expand(node, frontier)

        logger.debug(
            f"Distance map from {source}: {len(visited)} of "
            f"{self._board_size ** 2} squares reachable"
        )
        return distances


def find_shortest_path(
    source: Square,
    destination: Square,
    board_size: int = DEFAULT_BOARD_SIZE,
) -> int:
    """Minimum knight moves from source to destination on an N x N board."""
    return KnightPathFinder(board_size).find_shortest_path(source, destination)


def distance_map(source: Square, board_size: int = DEFAULT_BOARD_SIZE) -> np.ndarray:
    """Knight distances from source to every square of an N x N board."""
    return KnightPathFinder(board_size).distance_map(source)
