"""Successor-function factories for common grid problems.

The search engine only consumes successor functions; these factories cover
the two shapes that keep coming up: plain mazes with a uniform step cost, and
mazes where the walker has a facing and pays extra to turn.
"""

from typing import Any, Callable, List

from gridpath.core.data_models import ScoredNode, SuccessorFunction
from gridpath.core.direction import Direction
from gridpath.core.grid import Grid

FACING = 'dir'


def grid_successors(grid: Grid,
                    passable: Callable[[Any], bool],
                    step_cost: float = 1,
                    diagonal: bool = False) -> SuccessorFunction:
    """Moves onto passable in-bounds neighbors at a uniform cost.

    Args:
        grid: Grid providing bounds and cell values
        passable: Predicate over cell values
        step_cost: Cost of a single move
        diagonal: Allow the four diagonal moves as well

    Returns:
        Successor function for the search engine
    """
    def successors(current: ScoredNode) -> List[ScoredNode]:
        return [
            current.step(current.node.evolve(pos=neighbor), step_cost)
            for neighbor in grid.neighbors(current.pos, diagonal=diagonal)
            if passable(grid.at(neighbor))
        ]

    return successors


def turning_successors(grid: Grid,
                       passable: Callable[[Any], bool],
                       step_cost: float = 1,
                       turn_cost: float = 1000) -> SuccessorFunction:
    """Moves for a walker that carries a facing in its node state.

    From each node the walker may step one cell forward (``step_cost``) if the
    cell ahead is passable, or rotate 90 degrees left or right in place
    (``turn_cost``). Nodes must carry a ``dir`` state field holding a
    ``Direction``.
    """
    def successors(current: ScoredNode) -> List[ScoredNode]:
        node = current.node
        facing: Direction = node.get(FACING)
        if facing is None:
            raise ValueError(f"Node at {node.pos} has no '{FACING}' state")

        result = []
        ahead = facing.step(node.pos)
        if grid.is_in_bounds(ahead) and passable(grid.at(ahead)):
            result.append(current.step(node.evolve(pos=ahead), step_cost))
        for turned in (facing.left, facing.right):
            result.append(current.step(node.evolve(**{FACING: turned}), turn_cost))
        return result

    return successors
