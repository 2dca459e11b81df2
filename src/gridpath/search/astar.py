"""A* search over grid-shaped state spaces.

This module implements a best-first search that keeps every score-tying
predecessor of each node, so that all optimal paths (not just one) can be
reconstructed after the search. The open set is an ordered list with stable
binary-search insertion; ties in f-score are resolved by insertion order,
which keeps results reproducible for identical inputs.

The engine computes no edge costs of its own: the caller's successor function
reports each candidate together with its tentative score. The engine does no
I/O and holds no state between searches.
"""

import time
from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set, Union

from gridpath.core.data_models import (
    GoalPredicate, GridPath, HeuristicFunction, KeyFunction, Node, NodeKey,
    Position, ScoredNode, SuccessorFunction
)
from gridpath.core.exceptions import NoPathFound
from gridpath.search.heuristics import manhattan_heuristic, zero_heuristic
from gridpath.search.keys import node_key
from gridpath.search.open_set import OpenSet


@dataclass
class SearchStatistics:
    """Counters collected during a single search."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    score_improvements: int = 0
    equal_score_links: int = 0
    reinsertions: int = 0
    max_open_size: int = 0
    computation_time: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'score_improvements': self.score_improvements,
            'equal_score_links': self.equal_score_links,
            'reinsertions': self.reinsertions,
            'max_open_size': self.max_open_size,
            'computation_time': self.computation_time
        }


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    max_nodes_expanded: Optional[int] = None  # None runs until the open set is empty
    record_equal_parents: bool = True  # False keeps only the first optimal predecessor


@dataclass
class SearchResult:
    """Outcome of a successful search.

    The maps are read-only views; visualization and logging collaborators may
    inspect them but cannot feed anything back into the engine.
    """
    start_key: NodeKey
    nodes: Mapping[NodeKey, Node]
    scores: Mapping[NodeKey, float]
    parents: Mapping[NodeKey, Sequence[NodeKey]]
    visited: FrozenSet[NodeKey]
    finalized_goal_keys: Sequence[NodeKey]
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    termination_reason: str = "search_exhausted"

    @property
    def min_score(self) -> float:
        """Minimal total cost to any goal node."""
        return min(self.scores[key] for key in self.finalized_goal_keys)

    @property
    def goal_keys(self) -> List[NodeKey]:
        """Goal node keys that achieve the minimal score, in discovery order."""
        best = self.min_score
        return [key for key in self.finalized_goal_keys if self.scores[key] == best]

    def position_of(self, key: NodeKey) -> Position:
        return self.nodes[key].pos

    def best_path(self) -> GridPath:
        """One optimal path from start to goal.

        Walks back from the first minimal-score goal, always following the
        first-registered predecessor. The first goal in discovery order is
        used so that the path always ends at ``goal_keys[0]``.

        The walk stops at the start key, not the start position. A position
        can therefore appear more than once when a node differs from its
        predecessor only in auxiliary state, e.g. a walker turning in place
        on the start cell.
        """
        key = self.goal_keys[0]
        path = [self.position_of(key)]
        while key != self.start_key:
            key = self.parents[key][0]
            path.append(self.position_of(key))
        path.reverse()
        return path

    def best_paths(self) -> List[GridPath]:
        """Every optimal path from start to a minimal-score goal.

        Only simple paths are enumerated: a predecessor already on the partial
        path is not followed again, which matters when zero-cost edges form
        cycles. As with ``best_path``, positions may repeat.
        """
        worklist = deque([key] for key in self.goal_keys)
        complete: List[List[NodeKey]] = []

        while worklist:
            partial = worklist.popleft()
            head = partial[-1]
            if head == self.start_key:
                complete.append(partial)
                continue
            for parent in self.parents.get(head, ()):
                if parent not in partial:
                    worklist.append(partial + [parent])

        return [[self.position_of(key) for key in reversed(keys)] for keys in complete]

    def optimal_positions(self) -> Set[Position]:
        """Distinct positions lying on at least one optimal path."""
        positions: Set[Position] = set()
        seen: Set[NodeKey] = set()
        stack = list(self.goal_keys)

        while stack:
            key = stack.pop()
            if key in seen:
                continue
            seen.add(key)
            positions.add(self.position_of(key))
            if key == self.start_key:
                continue
            stack.extend(parent for parent in self.parents.get(key, ()) if parent not in seen)

        return positions

    def to_dict(self, include_paths: bool = False) -> Dict[str, Any]:
        """JSON-friendly summary of the result."""
        result: Dict[str, Any] = {
            'min_score': self.min_score,
            'goal_keys': [str(key) for key in self.goal_keys],
            'best_path': [list(pos) for pos in self.best_path()],
            'optimal_positions': len(self.optimal_positions()),
            'termination_reason': self.termination_reason,
            'search_stats': self.statistics.to_dict()
        }
        if include_paths:
            result['best_paths'] = [[list(pos) for pos in path] for path in self.best_paths()]
        return result


def goal_predicate(end: Union[Node, GoalPredicate]) -> GoalPredicate:
    """Turn a target node or a predicate into a goal test.

    A target node is reached by any node at its position, whatever the
    auxiliary state.
    """
    if isinstance(end, Node):
        target = end.pos
        return lambda node: node.pos == target
    if callable(end):
        return end
    raise TypeError(f"end must be a Node or a callable, got {type(end).__name__}")


class AStarSearcher:
    """A* search that records every optimal predecessor.

    Heuristics must be admissible (never overestimate the remaining cost) for
    the returned scores to be optimal. This is not checked at runtime; an
    inadmissible heuristic only risks suboptimal answers.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()

    def search(self,
               start: Node,
               end: Union[Node, GoalPredicate],
               successor_fn: SuccessorFunction,
               heuristic_fn: Optional[HeuristicFunction] = None,
               key_fn: Optional[KeyFunction] = None) -> SearchResult:
        """Find minimum-cost paths from ``start`` to ``end``.

        Args:
            start: Initial node (score 0)
            end: Target node, or predicate deciding whether a node is a goal
            successor_fn: Maps a scored node to candidate nodes with tentative
                scores (current score + edge cost)
            heuristic_fn: Admissible remaining-cost estimate. Defaults to
                Manhattan distance for a target node, zero for a predicate.
            key_fn: Node identity function, defaults to ``node_key``

        Returns:
            SearchResult with score and parent maps covering all reachable nodes

        Raises:
            NoPathFound: If no goal node was finalized
        """
        start_time = time.perf_counter()
        is_goal = goal_predicate(end)
        if heuristic_fn is None:
            heuristic_fn = manhattan_heuristic(end) if isinstance(end, Node) else zero_heuristic
        key_fn = key_fn or node_key
        max_nodes = self.config.max_nodes_expanded

        statistics = SearchStatistics()
        nodes: Dict[NodeKey, Node] = {}
        scores: Dict[NodeKey, float] = {}
        parents: Dict[NodeKey, List[NodeKey]] = {}
        visited: Set[NodeKey] = set()
        open_set: OpenSet = OpenSet()
        goal_keys: List[NodeKey] = []

        start_key = key_fn(start)
        nodes[start_key] = start
        scores[start_key] = 0
        open_set.push(start_key, heuristic_fn(start))
        termination_reason = "search_exhausted"

        while open_set:
            if max_nodes is not None and statistics.nodes_expanded >= max_nodes:
                termination_reason = "max_nodes_reached"
                break

            current_key, _ = open_set.pop()
            visited.add(current_key)
            current = nodes[current_key]
            if is_goal(current):
                goal_keys.append(current_key)

            candidates = list(successor_fn(ScoredNode(current, scores[current_key])))
            statistics.nodes_expanded += 1
            statistics.nodes_generated += len(candidates)

            for candidate in candidates:
                key = key_fn(candidate.node)
                # The start node is the root of every path
                if key == start_key:
                    continue

                previous = scores.get(key)
                if previous is None or candidate.score < previous:
                    if previous is not None:
                        statistics.score_improvements += 1
                    nodes.setdefault(key, candidate.node)
                    scores[key] = candidate.score
                    parents[key] = [current_key]
                    if key not in visited:
                        f_score = candidate.score + heuristic_fn(candidate.node)
                        if open_set.push(key, f_score):
                            statistics.reinsertions += 1
                elif candidate.score == previous and self.config.record_equal_parents:
                    # Also applies to visited nodes: a node can be finalized
                    # before all of its equal-cost predecessors are expanded.
                    if current_key not in parents[key]:
                        parents[key].append(current_key)
                        statistics.equal_score_links += 1

            statistics.max_open_size = max(statistics.max_open_size, len(open_set))

        statistics.computation_time = time.perf_counter() - start_time

        if not goal_keys:
            raise NoPathFound(
                f"No path from {start.pos} after expanding {statistics.nodes_expanded} nodes",
                nodes_expanded=statistics.nodes_expanded
            )

        return SearchResult(
            start_key=start_key,
            nodes=MappingProxyType(nodes),
            scores=MappingProxyType(scores),
            parents=MappingProxyType({key: tuple(value) for key, value in parents.items()}),
            visited=frozenset(visited),
            finalized_goal_keys=tuple(goal_keys),
            statistics=statistics,
            termination_reason=termination_reason
        )


def search(start: Node,
           end: Union[Node, GoalPredicate],
           successor_fn: SuccessorFunction,
           heuristic_fn: Optional[HeuristicFunction] = None,
           key_fn: Optional[KeyFunction] = None,
           config: Optional[SearchConfig] = None) -> SearchResult:
    """Run a single search with a fresh searcher."""
    return AStarSearcher(config).search(start, end, successor_fn, heuristic_fn, key_fn)


def create_astar_searcher(max_nodes_expanded: Optional[int] = None,
                          record_equal_parents: bool = True) -> AStarSearcher:
    """Factory function to create A* searcher with custom configuration.

    Args:
        max_nodes_expanded: Safety cap on expansions (None for no cap)
        record_equal_parents: Keep every optimal predecessor, not only the first

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        max_nodes_expanded=max_nodes_expanded,
        record_equal_parents=record_equal_parents
    )

    return AStarSearcher(config)
