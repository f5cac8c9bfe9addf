"""
Tests for vertex and adjacency value types.
"""

import pytest

from mazegraph.core.exceptions import ValidationError
from mazegraph.core.models import Adjacency, Coordinate2D


def test_coordinate_equality_and_hash():
    """Test that coordinates compare and hash by value."""
    first = Coordinate2D(3, 4)
    second = Coordinate2D(3, 4)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, Coordinate2D(4, 3)}) == 2


def test_coordinate_accepts_floats():
    """Test fractional coordinates."""
    point = Coordinate2D(0.5, -2.25)

    assert point.as_tuple() == (0.5, -2.25)
    assert str(point) == "(0.5, -2.25)"


def test_coordinate_is_immutable():
    """Test that coordinates cannot be modified once created."""
    point = Coordinate2D(1, 2)

    with pytest.raises(AttributeError):
        point.x = 5


@pytest.mark.parametrize(
    "x, y, field_name",
    [
        ("1", 2, "x"),
        (1, None, "y"),
        (True, 0, "x"),
        (0, [1], "y"),
    ],
)
def test_coordinate_rejects_non_numeric_components(x, y, field_name):
    """Test coordinate validation."""
    with pytest.raises(ValidationError, match=f"{field_name} must be a real number"):
        Coordinate2D(x, y)


def test_adjacency_defaults_to_unweighted():
    """Test the default adjacency weight."""
    entry = Adjacency("b")

    assert entry.target == "b"
    assert entry.weight is None
    assert entry == ("b", None)


def test_adjacency_unpacks_like_a_pair():
    """Test tuple unpacking of adjacency entries."""
    target, weight = Adjacency("c", 7)

    assert target == "c"
    assert weight == 7
