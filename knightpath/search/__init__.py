"""
Search module.

Provides the breadth-first knight search:
- FifoQueue: Insertion-ordered frontier container
- KnightPathFinder: BFS over the knight-move graph of an N x N board
- find_shortest_path: Minimum number of moves between two squares
- distance_map: Distances from one square to every square of the board
"""

from knightpath.search.finder import KnightPathFinder, distance_map, find_shortest_path
from knightpath.search.queue import FifoQueue

__all__ = [
    "FifoQueue",
    "KnightPathFinder",
    "distance_map",
    "find_shortest_path",
]
