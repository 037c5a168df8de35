"""Transposition caches: state -> previously computed heuristic value."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable, Optional, Protocol


class Transpositions(Protocol):
    def get(self, state: Hashable) -> Optional[float]:
        """Cached value, or None on a miss. A stored 0.0 is a hit."""
        ...

    def put(self, state: Hashable, value: float) -> None:
        ...


class TranspositionTable:
    """
    Dict-backed cache keyed by the state itself.

    With ``max_entries`` set, the least recently used entry is evicted once
    the table is full. Unbounded by default.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive or None.")
        self._d: OrderedDict[Hashable, float] = OrderedDict()
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, state: Hashable) -> Optional[float]:
        if state not in self._d:
            self.misses += 1
            return None
        self.hits += 1
        if self.max_entries is not None:
            self._d.move_to_end(state)
        return self._d[state]

    def put(self, state: Hashable, value: float) -> None:
        if state in self._d:
            self._d.move_to_end(state)
        elif self.max_entries is not None and len(self._d) >= self.max_entries:
            self._d.popitem(last=False)
            self.evictions += 1
        self._d[state] = float(value)

    def __contains__(self, state: Hashable) -> bool:
        return state in self._d

    def __len__(self) -> int:
        return len(self._d)

    def clear(self) -> None:
        self._d.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> dict:
        lookups = self.hits + self.misses
        return {
            "entries": len(self._d),
            "max_entries": self.max_entries,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hits / lookups if lookups else 0.0,
        }


class NoTranspositions:
    """Cache that never remembers anything."""

    def get(self, state: Hashable) -> Optional[float]:
        return None

    def put(self, state: Hashable, value: float) -> None:
        pass
