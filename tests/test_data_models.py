"""Tests for core data models and directions."""

import pytest

from gridpath.core.data_models import Node, Position, ScoredNode
from gridpath.core.direction import Direction, dir_between, relative_dir, relative_dirs


class TestPosition:
    """Test Position functionality."""

    def test_position_is_tuple(self):
        """Test positions compare and unpack like (row, col) tuples."""
        pos = Position(2, 3)
        row, col = pos

        assert (row, col) == (2, 3)
        assert pos == (2, 3)
        assert hash(pos) == hash((2, 3))

    def test_moved(self):
        """Test offset positions."""
        assert Position(2, 3).moved(-1, 1) == Position(1, 4)

    def test_str(self):
        assert str(Position(0, 12)) == "(0,12)"


class TestNode:
    """Test Node functionality."""

    def test_node_creation(self):
        """Test basic node creation."""
        node = Node.at(1, 2, dir=Direction.EAST)

        assert node.pos == Position(1, 2)
        assert node.row == 1
        assert node.col == 2
        assert node.get('dir') is Direction.EAST
        assert node.get('missing', 'fallback') == 'fallback'

    def test_tuple_position_normalized(self):
        """Test plain tuples are converted to Position."""
        node = Node((4, 5))
        assert isinstance(node.pos, Position)

    def test_state_order_ignored(self):
        """Test field order does not affect equality or hashing."""
        a = Node(Position(1, 1), (('b', 2), ('a', 1)))
        b = Node.at(1, 1, a=1, b=2)

        assert a == b
        assert hash(a) == hash(b)
        assert a.state == (('a', 1), ('b', 2))

    def test_evolve(self):
        """Test evolve returns an updated copy."""
        node = Node.at(0, 0, dir=Direction.NORTH, keys=0)
        moved = node.evolve(pos=(0, 1))
        turned = node.evolve(dir=Direction.WEST)

        assert moved.pos == Position(0, 1)
        assert moved.get('dir') is Direction.NORTH
        assert turned.pos == node.pos
        assert turned.get('dir') is Direction.WEST
        assert turned.get('keys') == 0
        assert node.get('dir') is Direction.NORTH

    def test_node_immutable(self):
        """Test nodes are frozen."""
        node = Node.at(0, 0)
        with pytest.raises(AttributeError):
            node.pos = Position(1, 1)

    def test_reserved_field(self):
        """Test 'pos' cannot be used as an auxiliary field."""
        with pytest.raises(AssertionError):
            Node(Position(0, 0), (('pos', 1),))


class TestScoredNode:
    """Test ScoredNode functionality."""

    def test_step(self):
        """Test successor scores accumulate edge costs."""
        current = ScoredNode(Node.at(0, 0), 5)
        candidate = current.step(Node.at(0, 1), 3)

        assert candidate.score == 8
        assert candidate.pos == Position(0, 1)
        assert current.score == 5

    def test_default_score(self):
        assert ScoredNode(Node.at(0, 0)).score == 0


class TestDirection:
    """Test Direction functionality."""

    def test_rotation(self):
        """Test left/right/opposite rotations."""
        assert Direction.NORTH.right is Direction.EAST
        assert Direction.NORTH.left is Direction.WEST
        assert Direction.WEST.right is Direction.NORTH
        assert Direction.SOUTH.opposite is Direction.NORTH

        for direction in Direction:
            assert direction.left.right is direction

    def test_step(self):
        """Test stepping follows row/column conventions."""
        origin = Position(5, 5)

        assert Direction.NORTH.step(origin) == Position(4, 5)
        assert Direction.EAST.step(origin) == Position(5, 6)
        assert Direction.SOUTH.step(origin) == Position(6, 5)
        assert Direction.WEST.step(origin) == Position(5, 4)

    def test_str(self):
        assert str(Direction.EAST) == "east"

    def test_relative_dirs(self):
        """Test relative direction mapping."""
        assert relative_dirs(Direction.EAST) == {
            'forward': Direction.EAST,
            'left': Direction.NORTH,
            'right': Direction.SOUTH,
        }

    def test_relative_dir(self):
        """Test naming the turn between two facings."""
        assert relative_dir(Direction.NORTH, Direction.EAST) == 'right'
        assert relative_dir(Direction.NORTH, Direction.WEST) == 'left'
        assert relative_dir(Direction.NORTH, Direction.NORTH) == 'forward'
        assert relative_dir(Direction.NORTH, Direction.SOUTH) is None

    def test_dir_between(self):
        """Test direction between aligned positions."""
        assert dir_between(Position(2, 2), Position(2, 7)) is Direction.EAST
        assert dir_between(Position(2, 2), Position(0, 2)) is Direction.NORTH

        with pytest.raises(ValueError):
            dir_between(Position(2, 2), Position(3, 3))
        with pytest.raises(ValueError):
            dir_between(Position(2, 2), Position(2, 2))


if __name__ == "__main__":
    pytest.main([__file__])
