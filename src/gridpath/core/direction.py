"""Compass directions and relative turns on a row/column grid."""

from enum import Enum
from typing import Dict, Optional, Tuple

from .data_models import Position


class Direction(Enum):
    """Facing on the grid. Rows grow southwards, columns grow eastwards."""

    NORTH = 'north'
    EAST = 'east'
    SOUTH = 'south'
    WEST = 'west'

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def right(self) -> 'Direction':
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    @property
    def left(self) -> 'Direction':
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    @property
    def opposite(self) -> 'Direction':
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    def step(self, pos: Position) -> Position:
        """Position one cell ahead of ``pos`` in this direction."""
        return pos.moved(*self.offset)

    def __str__(self) -> str:
        return self.value


_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def relative_dirs(direction: Direction) -> Dict[str, Direction]:
    """Map 'forward', 'left' and 'right' to absolute directions."""
    return {
        'forward': direction,
        'left': direction.left,
        'right': direction.right,
    }


def relative_dir(facing: Direction, target: Direction) -> Optional[str]:
    """Name of the turn that takes ``facing`` to ``target``, or None for a U-turn."""
    for name, direction in relative_dirs(facing).items():
        if direction is target:
            return name
    return None


def dir_between(source: Position, target: Position) -> Direction:
    """Direction of the straight line from ``source`` to ``target``.

    Raises:
        ValueError: If the positions are identical or not on a shared row/column
    """
    if source.row == target.row:
        if source.col < target.col:
            return Direction.EAST
        if source.col > target.col:
            return Direction.WEST
    elif source.col == target.col:
        return Direction.SOUTH if source.row < target.row else Direction.NORTH
    raise ValueError(f"No direction between {source} and {target}")
