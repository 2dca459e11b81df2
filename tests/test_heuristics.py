"""Tests for heuristics and successor-function factories."""

import pytest

from gridpath.core.data_models import Node, Position, ScoredNode
from gridpath.core.direction import Direction
from gridpath.core.grid import Grid
from gridpath.search.heuristics import (
    HEURISTICS, chebyshev_distance, chebyshev_heuristic, create_heuristic,
    manhattan_distance, manhattan_heuristic, zero_heuristic
)
from gridpath.search.successors import FACING, grid_successors, turning_successors


class TestHeuristics:
    """Test heuristic functions."""

    def test_distances(self):
        """Test L1 and L-infinity distances."""
        assert manhattan_distance((0, 0), (3, 4)) == 7
        assert chebyshev_distance((0, 0), (3, 4)) == 4
        assert manhattan_distance((2, 2), (2, 2)) == 0

    def test_manhattan_heuristic(self):
        """Test estimates ignore auxiliary state."""
        heuristic = manhattan_heuristic(Node.at(4, 4))

        assert heuristic(Node.at(0, 0)) == 8
        assert heuristic(Node.at(0, 0, dir=Direction.EAST)) == 8
        assert heuristic(Node.at(4, 4)) == 0

    def test_scaled_heuristic(self):
        """Test step-cost scaling."""
        heuristic = manhattan_heuristic(Position(0, 3), scale=2)
        assert heuristic(Node.at(0, 0)) == 6

    def test_chebyshev_heuristic(self):
        heuristic = chebyshev_heuristic(Position(3, 1))
        assert heuristic(Node.at(0, 0)) == 3

    def test_zero_heuristic(self):
        assert zero_heuristic(Node.at(9, 9)) == 0

    def test_create_heuristic(self):
        """Test factory lookup by name."""
        target = Position(2, 2)

        assert create_heuristic('zero') is zero_heuristic
        assert create_heuristic('manhattan', target)(Node.at(0, 0)) == 4
        assert create_heuristic('chebyshev', target)(Node.at(0, 0)) == 2
        assert set(HEURISTICS) == {'manhattan', 'chebyshev', 'zero'}

    def test_create_heuristic_errors(self):
        """Test unknown names and missing targets."""
        with pytest.raises(ValueError, match="Unknown heuristic"):
            create_heuristic('euclid', Position(0, 0))
        with pytest.raises(ValueError, match="requires a target"):
            create_heuristic('manhattan')


class TestGridSuccessors:
    """Test uniform-cost successors."""

    @pytest.fixture
    def grid(self):
        return Grid.from_text("...\n.#.\n...")

    def test_orthogonal_moves(self, grid):
        """Test moves onto open neighbors only."""
        successors = grid_successors(grid, lambda cell: cell != '#')
        result = successors(ScoredNode(Node.at(0, 1), 4))

        assert [c.pos for c in result] == [(0, 2), (0, 0)]
        assert all(c.score == 5 for c in result)

    def test_step_cost_and_diagonal(self, grid):
        """Test custom cost and diagonal moves."""
        successors = grid_successors(grid, lambda cell: cell != '#', step_cost=3, diagonal=True)
        result = successors(ScoredNode(Node.at(0, 0)))

        assert {c.pos for c in result} == {(0, 1), (1, 0)}
        assert all(c.score == 3 for c in result)

    def test_state_carried(self, grid):
        """Test auxiliary state survives moves."""
        successors = grid_successors(grid, lambda cell: cell != '#')
        result = successors(ScoredNode(Node.at(2, 2, keys=1)))

        assert all(c.node.get('keys') == 1 for c in result)


class TestTurningSuccessors:
    """Test facing-aware successors."""

    @pytest.fixture
    def grid(self):
        return Grid.from_text("#.#\n...")

    def test_forward_and_turns(self, grid):
        """Test a forward step plus two quarter turns."""
        successors = turning_successors(grid, lambda cell: cell != '#', turn_cost=1000)
        result = successors(ScoredNode(Node.at(1, 0, **{FACING: Direction.EAST}), 10))

        assert result[0].node == Node.at(1, 1, dir=Direction.EAST)
        assert result[0].score == 11
        assert result[1].node == Node.at(1, 0, dir=Direction.NORTH)
        assert result[2].node == Node.at(1, 0, dir=Direction.SOUTH)
        assert result[1].score == result[2].score == 1010

    def test_blocked_ahead(self, grid):
        """Test no forward move into a wall or off the grid."""
        successors = turning_successors(grid, lambda cell: cell != '#')

        facing_wall = successors(ScoredNode(Node.at(1, 0, dir=Direction.NORTH)))
        facing_edge = successors(ScoredNode(Node.at(1, 2, dir=Direction.EAST)))

        assert len(facing_wall) == 2
        assert len(facing_edge) == 2
        assert all(c.pos == (1, 2) for c in facing_edge)

    def test_requires_facing(self, grid):
        successors = turning_successors(grid, lambda cell: cell != '#')
        with pytest.raises(ValueError):
            successors(ScoredNode(Node.at(1, 1)))
