"""
Unit tests for board value types.
"""

import dataclasses

import pytest

from knightpath.board import KNIGHT_MOVES, SearchNode, Square, is_within_board


class TestSquare:
    """Test the Square value type."""

    def test_equality_by_coordinates(self):
        """Squares with the same coordinates should be equal."""
        assert Square(3, 4) == Square(3, 4)
        assert Square(3, 4) != Square(4, 3)

    def test_usable_as_set_key(self):
        """Equal squares should collapse in a set."""
        assert len({Square(1, 2), Square(1, 2), Square(2, 1)}) == 2

    def test_immutable(self):
        """Assigning to a coordinate should fail."""
        square = Square(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            square.x = 5

    def test_offset_returns_new_square(self):
        """Offset should not change the original square."""
        square = Square(2, 2)
        assert square.offset(1, -2) == Square(3, 0)
        assert square == Square(2, 2)

    def test_str(self):
        """String form should show both coordinates."""
        assert str(Square(7, 0)) == "(7, 0)"


class TestSearchNode:
    """Test the SearchNode value type."""

    def test_default_distance_zero(self):
        """A node created without a distance is a source node."""
        assert SearchNode(Square(0, 0)).distance == 0

    def test_immutable(self):
        """Assigning to distance should fail."""
        node = SearchNode(Square(0, 0), 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.distance = 4


class TestKnightMoves:
    """Test the knight move offset table."""

    def test_eight_distinct_moves(self):
        """There should be exactly 8 distinct offsets."""
        assert len(KNIGHT_MOVES) == 8
        assert len(set(KNIGHT_MOVES)) == 8

    def test_all_moves_are_l_shaped(self):
        """Every offset should be (±1, ±2) or (±2, ±1)."""
        for dx, dy in KNIGHT_MOVES:
            assert {abs(dx), abs(dy)} == {1, 2}

    def test_moves_are_reversible(self):
        """The negation of every move should also be a move."""
        for dx, dy in KNIGHT_MOVES:
            assert (-dx, -dy) in KNIGHT_MOVES


class TestIsWithinBoard:
    """Test the board bounds check."""

    @pytest.mark.parametrize("square", [Square(0, 0), Square(7, 7), Square(0, 7), Square(3, 5)])
    def test_inside(self, square):
        """Squares in [0, 8) on both axes are on an 8x8 board."""
        assert is_within_board(square, 8) is True

    @pytest.mark.parametrize("square", [Square(-1, 0), Square(0, -1), Square(8, 0), Square(0, 8)])
    def test_outside(self, square):
        """Squares off either edge are not on an 8x8 board."""
        assert is_within_board(square, 8) is False

    def test_empty_board(self):
        """No square is on a board of size 0."""
        assert is_within_board(Square(0, 0), 0) is False
