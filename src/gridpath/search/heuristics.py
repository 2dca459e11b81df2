"""Heuristic functions for grid search.

All heuristics here are admissible for unit-or-larger orthogonal step costs:
Manhattan distance never overestimates the number of 4-neighborhood moves to
the goal, Chebyshev distance does the same when diagonal moves are allowed,
and the zero heuristic turns A* into Dijkstra's algorithm.
"""

from typing import Optional, Tuple, Union

from gridpath.core.data_models import HeuristicFunction, Node, Position

HEURISTICS = ('manhattan', 'chebyshev', 'zero')


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """L1 distance between two (row, col) positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """L-infinity distance; admissible when diagonal moves cost one step."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def zero_heuristic(node: Node) -> float:
    return 0


def manhattan_heuristic(target: Union[Node, Position], scale: float = 1) -> HeuristicFunction:
    """Heuristic measuring Manhattan distance to ``target``'s position.

    Args:
        target: Goal node or position
        scale: Minimum cost of a single step; keeps the estimate admissible
            when every move costs at least this much
    """
    goal = target.pos if isinstance(target, Node) else Position(*target)

    def heuristic(node: Node) -> float:
        return manhattan_distance(node.pos, goal) * scale

    return heuristic


def chebyshev_heuristic(target: Union[Node, Position], scale: float = 1) -> HeuristicFunction:
    """Heuristic measuring Chebyshev distance to ``target``'s position."""
    goal = target.pos if isinstance(target, Node) else Position(*target)

    def heuristic(node: Node) -> float:
        return chebyshev_distance(node.pos, goal) * scale

    return heuristic


def create_heuristic(name: str,
                     target: Optional[Union[Node, Position]] = None,
                     scale: float = 1) -> HeuristicFunction:
    """Factory function to create a heuristic by name.

    Args:
        name: 'manhattan', 'chebyshev' or 'zero'
        target: Goal node or position (required except for 'zero')
        scale: Minimum step cost used to scale distance-based estimates

    Returns:
        Heuristic callable

    Raises:
        ValueError: If the name is unknown or a distance heuristic has no target
    """
    if name == 'zero':
        return zero_heuristic
    if name in ('manhattan', 'chebyshev'):
        if target is None:
            raise ValueError(f"{name} heuristic requires a target position")
        if name == 'manhattan':
            return manhattan_heuristic(target, scale)
        return chebyshev_heuristic(target, scale)
    raise ValueError(f"Unknown heuristic '{name}', expected one of {HEURISTICS}")
