"""Ordered open set for best-first search."""

from bisect import bisect_right
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar('K')


class OpenSet(Generic[K]):
    """Frontier ordered by ascending f-score.

    Entries with equal f-score keep their insertion order: a new entry is
    placed after every entry whose f-score is less than or equal to its own.
    A key appears at most once; re-pushing a key replaces its old entry.
    """

    def __init__(self) -> None:
        self._scores: List[float] = []
        self._keys: List[K] = []
        self._members: Dict[K, float] = {}

    def push(self, key: K, f_score: float) -> bool:
        """Insert ``key`` at its sorted position.

        Returns:
            True if a stale entry for the key was removed first
        """
        replaced = self.discard(key)
        index = bisect_right(self._scores, f_score)
        self._scores.insert(index, f_score)
        self._keys.insert(index, key)
        self._members[key] = f_score
        return replaced

    def discard(self, key: K) -> bool:
        """Remove ``key`` if present."""
        if key not in self._members:
            return False
        del self._members[key]
        index = self._keys.index(key)
        del self._scores[index]
        del self._keys[index]
        return True

    def pop(self) -> Tuple[K, float]:
        """Remove and return the entry with the lowest f-score.

        Raises:
            IndexError: If the open set is empty
        """
        if not self._keys:
            raise IndexError("pop from empty open set")
        key = self._keys.pop(0)
        f_score = self._scores.pop(0)
        del self._members[key]
        return key, f_score

    def peek(self) -> Optional[K]:
        return self._keys[0] if self._keys else None

    def f_score(self, key: K) -> Optional[float]:
        return self._members.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))
