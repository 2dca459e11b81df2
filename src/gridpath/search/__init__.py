"""Search algorithms for gridpath.

This module implements the best-first (A*) search engine that records every
optimal predecessor, together with node keys, the ordered open set, heuristics
and successor-function factories.
"""

from .astar import AStarSearcher, SearchConfig, SearchResult, SearchStatistics, create_astar_searcher, search
from .heuristics import create_heuristic, manhattan_distance, chebyshev_distance, zero_heuristic
from .keys import node_key, position_from_key
from .open_set import OpenSet
from .successors import grid_successors, turning_successors

__all__ = [
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'create_astar_searcher',
    'search',
    'create_heuristic',
    'manhattan_distance',
    'chebyshev_distance',
    'zero_heuristic',
    'node_key',
    'position_from_key',
    'OpenSet',
    'grid_successors',
    'turning_successors'
]
