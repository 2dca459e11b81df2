"""Tests for node key serialization."""

import pytest

from gridpath.core.data_models import Node, Position
from gridpath.core.direction import Direction
from gridpath.core.exceptions import GridPathError, MalformedNodeKey
from gridpath.search.keys import (
    node_key, position_from_key, position_key, position_key_from_node_key
)


class TestNodeKey:
    """Test canonical node keys."""

    def test_position_key(self):
        assert position_key(Position(3, 4)) == "pos:{3,4}"

    def test_plain_node(self):
        """Test key for a node without auxiliary state."""
        assert node_key(Node.at(0, 0)) == "pos:{0,0}"

    def test_fields_sorted_by_name(self):
        """Test auxiliary fields and position are serialized in name order."""
        assert node_key(Node.at(3, 4, dir=Direction.EAST)) == "dir:east;pos:{3,4}"
        assert node_key(Node.at(1, 2, z=1, a='x')) == "a:x;pos:{1,2};z:1"

    def test_equal_nodes_equal_keys(self):
        """Test construction order does not change the key."""
        a = Node(Position(1, 1), (('b', True), ('a', 2)))
        b = Node.at(1, 1, a=2, b=True)
        assert node_key(a) == node_key(b)

    def test_distinct_state_distinct_keys(self):
        """Test nodes differing only in auxiliary state get different keys."""
        east = Node.at(2, 2, dir=Direction.EAST)
        north = Node.at(2, 2, dir=Direction.NORTH)
        assert node_key(east) != node_key(north)


class TestPositionFromKey:
    """Test decoding positions from keys."""

    def test_decode(self):
        assert position_from_key("dir:east;pos:{3,4}") == Position(3, 4)
        assert position_from_key("pos:{-1,12}") == Position(-1, 12)

    def test_round_trip(self):
        node = Node.at(7, 9, dir=Direction.SOUTH, keys=2)
        assert position_from_key(node_key(node)) == node.pos

    def test_position_part(self):
        assert position_key_from_node_key("dir:west;pos:{1,2}") == "pos:{1,2}"

    @pytest.mark.parametrize("key", ["", "dir:east", "pos:3,4", "pos:{a,b}"])
    def test_malformed(self, key):
        """Test keys without a position segment are rejected."""
        with pytest.raises(MalformedNodeKey):
            position_from_key(key)

    def test_non_string(self):
        """Test non-string keys are rejected."""
        with pytest.raises(MalformedNodeKey):
            position_from_key((3, 4))

    def test_error_hierarchy(self):
        """Test MalformedNodeKey is catchable as ValueError."""
        with pytest.raises(ValueError):
            position_from_key("nothing")
        assert issubclass(MalformedNodeKey, GridPathError)
