"""Unit tests for coordinates and cardinal directions."""

import dataclasses

import pytest
from fire_breaker.errors import ErrorKind, RuleViolation
from fire_breaker.position import CardinalDirection, Coordinate


class TestCoordinate:
    """Test cases for Coordinate."""

    def test_equality_and_hash_by_value(self):
        """Test that coordinates compare and hash by their values."""
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2

    def test_coordinate_is_immutable(self):
        """Test that a coordinate cannot be changed."""
        position = Coordinate(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            position.row = 3

    def test_bounds(self):
        """Test bounds checking on a 5x5 board."""
        assert Coordinate(0, 0).in_bounds(5, 5)
        assert Coordinate(4, 4).in_bounds(5, 5)
        assert not Coordinate(5, 0).in_bounds(5, 5)
        assert not Coordinate(0, -1).in_bounds(5, 5)

    def test_check_raises_out_of_bounds(self):
        """Test that check rejects positions off the board."""
        with pytest.raises(RuleViolation) as excinfo:
            Coordinate(2, 7).check(5, 5)
        assert excinfo.value.kind is ErrorKind.OUT_OF_BOUNDS

    def test_neighbours_in_corner(self):
        """Test that neighbours off the board are dropped."""
        assert Coordinate(0, 0).neighbours(5, 5) == [Coordinate(0, 1), Coordinate(1, 0)]

    def test_all_four_neighbours(self):
        """Test that an inner cell has four straight neighbours."""
        neighbours = Coordinate(2, 2).neighbours(5, 5)
        assert neighbours == [Coordinate(1, 2), Coordinate(2, 3), Coordinate(3, 2), Coordinate(2, 1)]

    @pytest.mark.parametrize(
        "direction, expected",
        [
            (CardinalDirection.NORTH, Coordinate(1, 2)),
            (CardinalDirection.EAST, Coordinate(2, 3)),
            (CardinalDirection.SOUTH, Coordinate(3, 2)),
            (CardinalDirection.WEST, Coordinate(2, 1)),
        ],
    )
    def test_neighbours_in_direction(self, direction, expected):
        """Test that a single direction yields a single straight neighbour."""
        assert Coordinate(2, 2).neighbours(5, 5, direction=direction) == [expected]

    def test_no_direction_has_no_neighbours(self):
        """Test that NONE never spreads anywhere."""
        assert Coordinate(2, 2).neighbours(5, 5, direction=CardinalDirection.NONE) == []

    def test_str(self):
        """Test string representation of a coordinate."""
        assert str(Coordinate(3, 4)) == "3,4"


class TestCardinalDirection:
    """Test cases for CardinalDirection."""

    @pytest.mark.parametrize(
        "roll, direction",
        [
            (1, CardinalDirection.ALL_DIRECTIONS),
            (2, CardinalDirection.NORTH),
            (3, CardinalDirection.EAST),
            (4, CardinalDirection.SOUTH),
            (5, CardinalDirection.WEST),
            (6, CardinalDirection.NONE),
        ],
    )
    def test_from_roll(self, roll, direction):
        """Test mapping of die values to directions."""
        assert CardinalDirection.from_roll(roll) is direction

    def test_invalid_roll(self):
        """Test that values outside 1..6 are rejected."""
        with pytest.raises(ValueError):
            CardinalDirection.from_roll(7)
