"""Maze problems: text mazes with walls, a start marker and an end marker."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from gridpath.core.data_models import Node, Position
from gridpath.core.direction import Direction
from gridpath.core.exceptions import MazeFormatError
from gridpath.core.grid import Grid, flood_fill
from gridpath.search.astar import AStarSearcher, SearchConfig, SearchResult
from gridpath.search.heuristics import create_heuristic
from gridpath.search.successors import FACING, grid_successors, turning_successors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MazeProblem:
    """A grid with a single start and a single end cell."""

    grid: Grid
    start: Position
    end: Position
    wall: str = '#'

    def passable(self, cell: Any) -> bool:
        return cell != self.wall

    @classmethod
    def from_text(cls, text: str, wall: str = '#', start: str = 'S', end: str = 'E') -> 'MazeProblem':
        """Parse a maze.

        Args:
            text: Maze rows, one per line
            wall: Character marking impassable cells
            start: Character marking the start cell
            end: Character marking the end cell

        Raises:
            MazeFormatError: If the text is empty or ragged, or a marker is
                missing or appears more than once
        """
        if not text.strip():
            raise MazeFormatError("Maze text is empty")
        try:
            grid = Grid.from_text(text)
        except ValueError as e:
            raise MazeFormatError(f"Invalid maze: {e}") from e

        positions = {}
        for name, marker in (('start', start), ('end', end)):
            found = grid.find_all(marker)
            if len(found) != 1:
                raise MazeFormatError(
                    f"Expected exactly one {name} marker '{marker}', found {len(found)}"
                )
            positions[name] = found[0]

        return cls(grid=grid, start=positions['start'], end=positions['end'], wall=wall)


def solve_maze(problem: MazeProblem,
               turn_cost: Optional[float] = None,
               step_cost: float = 1,
               diagonal: bool = False,
               heuristic: str = 'manhattan',
               config: Optional[SearchConfig] = None) -> SearchResult:
    """Find the cheapest routes through a maze.

    Without ``turn_cost`` every move to a neighboring open cell costs
    ``step_cost``. With ``turn_cost`` the walker starts facing east, steps
    forward for ``step_cost`` and turns 90 degrees in place for ``turn_cost``;
    its facing is auxiliary node state, so the end is reached in any facing.

    Args:
        problem: Parsed maze
        turn_cost: Cost of a quarter turn, enables facing-aware movement
        step_cost: Cost of one move
        diagonal: Allow diagonal moves (ignored when turning is enabled)
        heuristic: Heuristic name, see ``create_heuristic``
        config: Search configuration

    Returns:
        SearchResult of the underlying search

    Raises:
        NoPathFound: If the end cannot be reached
    """
    if diagonal and turn_cost is None and heuristic == 'manhattan':
        logger.warning("Manhattan distance overestimates with diagonal moves; using chebyshev")
        heuristic = 'chebyshev'

    reachable = flood_fill(problem.grid, problem.start, problem.passable,
                           diagonal=diagonal and turn_cost is None)
    logger.debug(f"{len(reachable)} cells reachable from {problem.start}")
    if problem.end not in reachable:
        logger.info(f"End {problem.end} is walled off from start {problem.start}")

    heuristic_fn = create_heuristic(heuristic, problem.end, scale=step_cost)

    if turn_cost is None:
        start = Node(problem.start)
        successor_fn = grid_successors(problem.grid, problem.passable, step_cost, diagonal)
    else:
        start = Node.at(problem.start.row, problem.start.col, **{FACING: Direction.EAST})
        successor_fn = turning_successors(problem.grid, problem.passable, step_cost, turn_cost)

    searcher = AStarSearcher(config)

    logger.info(f"Searching {problem.grid.shape} maze from {problem.start} to {problem.end}")
    result = searcher.search(start, Node(problem.end), successor_fn, heuristic_fn)
    logger.info(
        f"Search finished: min score {result.min_score}, "
        f"{result.statistics.nodes_expanded} nodes expanded in "
        f"{result.statistics.computation_time:.3f}s"
    )
    return result
