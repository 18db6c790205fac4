"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from knightpath.board import Square
from knightpath.search import KnightPathFinder


@pytest.fixture
def standard_finder() -> KnightPathFinder:
    """Return a finder for a standard 8x8 chessboard."""
    return KnightPathFinder(8)


@pytest.fixture
def corner() -> Square:
    """Return the a1 corner square."""
    return Square(0, 0)
