"""gridpath: minimum-cost path search over 2D grids."""

from gridpath.core import Grid, Node, Position, ScoredNode, NoPathFound, MalformedNodeKey
from gridpath.search import AStarSearcher, SearchConfig, SearchResult, search

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'Node',
    'Position',
    'ScoredNode',
    'NoPathFound',
    'MalformedNodeKey',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'search'
]
