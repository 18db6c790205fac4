"""
Knight Path Finder.

Computes the minimum number of knight moves between two squares of an
N x N chessboard with a breadth-first search over the knight-move graph.
"""

__version__ = "0.1.0"
