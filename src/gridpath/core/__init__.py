"""Core data structures: positions, nodes, grids and directions."""

from .data_models import Position, Node, ScoredNode, GridPath
from .direction import Direction, relative_dir, relative_dirs, dir_between
from .exceptions import GridPathError, NoPathFound, MalformedNodeKey, MazeFormatError
from .grid import Grid, VisitedOverlay, flood_fill

__all__ = [
    'Position',
    'Node',
    'ScoredNode',
    'GridPath',
    'Direction',
    'relative_dir',
    'relative_dirs',
    'dir_between',
    'GridPathError',
    'NoPathFound',
    'MalformedNodeKey',
    'MazeFormatError',
    'Grid',
    'VisitedOverlay',
    'flood_fill'
]
