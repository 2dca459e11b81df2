"""Immutable 2D grid provider and visited overlay."""

from collections import deque
from typing import Any, Callable, Iterator, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from .data_models import Position

PositionLike = Union[Position, Tuple[int, int]]

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))  # up, right, down, left
_DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Grid:
    """Read-only 2D array of cells of arbitrary type.

    The wrapped numpy array is copied on construction and marked
    non-writeable, so neither the search engine nor helpers can modify it.
    """

    def __init__(self, cells: Union[np.ndarray, Sequence[Sequence[Any]]]):
        """Initialize grid.

        Args:
            cells: 2D numpy array or nested sequence of rows
        """
        if isinstance(cells, np.ndarray):
            data = cells.copy()
        else:
            rows = [list(row) for row in cells]
            if rows and len({len(row) for row in rows}) > 1:
                raise ValueError("All grid rows must have the same length")
            data = np.empty((len(rows), len(rows[0]) if rows else 0), dtype=object)
            for r, row in enumerate(rows):
                for c, value in enumerate(row):
                    data[r, c] = value

        if data.ndim != 2:
            raise ValueError(f"Grid must be 2D, got {data.ndim} dimensions")

        data.setflags(write=False)
        self._data = data

    @classmethod
    def from_text(cls, text: str) -> 'Grid':
        """Parse a grid of single characters, one row per line."""
        return cls([list(line) for line in text.strip("\n").splitlines()])

    @classmethod
    def generate(cls, rows: int, cols: int, cell: Callable[[Position], Any]) -> 'Grid':
        """Build a grid by calling ``cell`` for every position."""
        return cls([[cell(Position(r, c)) for c in range(cols)] for r in range(rows)])

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._data

    def is_in_bounds(self, pos: PositionLike) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def at(self, pos: PositionLike) -> Any:
        """Cell value at ``pos``.

        Raises:
            IndexError: If ``pos`` is out of bounds
        """
        if not self.is_in_bounds(pos):
            raise IndexError(f"Position {tuple(pos)} outside grid of shape {self.shape}")
        return self._data[pos[0], pos[1]]

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, tuple) and len(pos) == 2 and self.is_in_bounds(pos)

    def neighbors(self, pos: PositionLike, diagonal: bool = False) -> List[Position]:
        """In-bounds neighbors of ``pos`` (up, right, down, left, then diagonals)."""
        row, col = pos
        offsets = _ORTHOGONAL + _DIAGONAL if diagonal else _ORTHOGONAL
        candidates = [Position(row + dr, col + dc) for dr, dc in offsets]
        return [p for p in candidates if self.is_in_bounds(p)]

    def traverse(self) -> Iterator[Tuple[Position, Any]]:
        """Yield ``(position, value)`` in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(row, col), self._data[row, col]

    def find(self, value: Any) -> Optional[Position]:
        """First position (row-major) holding ``value``, or None."""
        for pos, item in self.traverse():
            if item == value:
                return pos
        return None

    def find_all(self, value: Any) -> List[Position]:
        """All positions holding ``value`` in row-major order."""
        return [pos for pos, item in self.traverse() if item == value]

    def to_lists(self) -> List[List[Any]]:
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._data == other._data))

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape})"


class VisitedOverlay:
    """Boolean mask over a grid, used instead of rewriting cells in place."""

    def __init__(self, shape: Tuple[int, int]):
        self._mask = np.zeros(shape, dtype=bool)

    @classmethod
    def for_grid(cls, grid: Grid) -> 'VisitedOverlay':
        return cls(grid.shape)

    def mark(self, pos: PositionLike) -> None:
        self._mask[pos[0], pos[1]] = True

    def is_marked(self, pos: PositionLike) -> bool:
        return bool(self._mask[pos[0], pos[1]])

    def count(self) -> int:
        return int(self._mask.sum())

    def positions(self) -> Set[Position]:
        return {Position(int(r), int(c)) for r, c in np.argwhere(self._mask)}


def flood_fill(grid: Grid,
               start: PositionLike,
               passable: Callable[[Any], bool],
               diagonal: bool = False) -> Set[Position]:
    """Positions reachable from ``start`` through passable cells.

    Args:
        grid: Grid to explore (left untouched)
        start: Starting position; included if its cell is passable
        passable: Predicate over cell values
        diagonal: Also step to diagonal neighbors

    Returns:
        Set of reachable positions
    """
    start = Position(*start)
    if not grid.is_in_bounds(start) or not passable(grid.at(start)):
        return set()

    overlay = VisitedOverlay.for_grid(grid)
    overlay.mark(start)
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        for neighbor in grid.neighbors(pos, diagonal=diagonal):
            if overlay.is_marked(neighbor) or not passable(grid.at(neighbor)):
                continue
            overlay.mark(neighbor)
            queue.append(neighbor)
    return overlay.positions()
