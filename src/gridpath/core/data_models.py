"""Core data models for grid path search."""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Hashable, Iterable, List, NamedTuple, Tuple, Union


class Position(NamedTuple):
    """A (row, col) cell coordinate."""

    row: int
    col: int

    def moved(self, d_row: int, d_col: int) -> 'Position':
        """Position offset by (d_row, d_col)."""
        return Position(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Node:
    """A search-space state: a grid position plus optional auxiliary state.

    Auxiliary state is stored as ``(name, value)`` pairs sorted by name so that
    two nodes built with the same fields in a different order compare equal.
    """

    pos: Position
    state: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        """Normalize position and state ordering."""
        if not isinstance(self.pos, Position):
            object.__setattr__(self, 'pos', Position(*self.pos))
        ordered = tuple(sorted(self.state, key=lambda item: item[0]))
        names = [name for name, _ in ordered]
        assert 'pos' not in names, "'pos' is reserved for the node position"
        assert len(set(names)) == len(names), f"Duplicate state fields: {names}"
        object.__setattr__(self, 'state', ordered)

    @classmethod
    def at(cls, row: int, col: int, **state: Any) -> 'Node':
        """Build a node at (row, col) with keyword auxiliary state."""
        return cls(Position(row, col), tuple(state.items()))

    def get(self, name: str, default: Any = None) -> Any:
        """Return an auxiliary state value by name."""
        for key, value in self.state:
            if key == name:
                return value
        return default

    def evolve(self, pos: Union[Position, Tuple[int, int], None] = None, **state: Any) -> 'Node':
        """Return a copy with a new position and/or updated auxiliary fields."""
        merged: Dict[str, Any] = dict(self.state)
        merged.update(state)
        return replace(
            self,
            pos=Position(*pos) if pos is not None else self.pos,
            state=tuple(merged.items()),
        )

    @property
    def row(self) -> int:
        return self.pos.row

    @property
    def col(self) -> int:
        return self.pos.col


@dataclass(frozen=True)
class ScoredNode:
    """A node together with its cost from the start (g-score)."""

    node: Node
    score: float = field(default=0)

    @property
    def pos(self) -> Position:
        return self.node.pos

    def step(self, node: Node, cost: float) -> 'ScoredNode':
        """Candidate successor reached from this node with an edge of ``cost``."""
        return ScoredNode(node, self.score + cost)


# Type aliases for clarity
NodeKey = Hashable
KeyFunction = Callable[[Node], NodeKey]
GoalPredicate = Callable[[Node], bool]
SuccessorFunction = Callable[[ScoredNode], Iterable[ScoredNode]]
HeuristicFunction = Callable[[Node], float]
GridPath = List[Position]  # start -> goal
