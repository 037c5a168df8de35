"""Unit tests for the transposition caches."""

import pytest

from minimax import NoTranspositions, TranspositionTable


class TestTranspositionTable:
    def test_miss_returns_none(self) -> None:
        table = TranspositionTable()
        assert table.get("missing") is None
        assert table.misses == 1

    def test_put_and_get(self) -> None:
        table = TranspositionTable()
        table.put("k", 3)
        assert table.get("k") == 3.0
        assert table.hits == 1

    def test_zero_is_a_hit(self) -> None:
        table = TranspositionTable()
        table.put("k", 0.0)
        assert table.get("k") == 0.0
        assert table.get("k") is not None

    def test_put_overwrites(self) -> None:
        table = TranspositionTable()
        table.put("k", 1.0)
        table.put("k", 2.0)
        assert table.get("k") == 2.0
        assert len(table) == 1

    def test_contains_and_len(self) -> None:
        table = TranspositionTable()
        table.put(("a", 1), 1.0)
        assert ("a", 1) in table
        assert ("b", 1) not in table
        assert len(table) == 1

    def test_lru_eviction(self) -> None:
        table = TranspositionTable(max_entries=2)
        table.put("a", 1.0)
        table.put("b", 2.0)
        table.get("a")          # "b" is now least recently used
        table.put("c", 3.0)

        assert "a" in table
        assert "b" not in table
        assert "c" in table
        assert table.evictions == 1

    def test_unbounded_by_default(self) -> None:
        table = TranspositionTable()
        for i in range(1000):
            table.put(i, float(i))
        assert len(table) == 1000
        assert table.evictions == 0

    def test_clear_resets_stats(self) -> None:
        table = TranspositionTable()
        table.put("a", 1.0)
        table.get("a")
        table.get("b")
        table.clear()
        assert len(table) == 0
        assert table.stats() == {
            "entries": 0,
            "max_entries": None,
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "hit_rate": 0.0,
        }

    def test_hit_rate(self) -> None:
        table = TranspositionTable()
        table.put("a", 1.0)
        table.get("a")
        table.get("b")
        assert table.stats()["hit_rate"] == pytest.approx(0.5)

    def test_rejects_bad_bound(self) -> None:
        with pytest.raises(ValueError):
            TranspositionTable(max_entries=0)


def test_no_transpositions_forgets() -> None:
    cache = NoTranspositions()
    cache.put("a", 1.0)
    assert cache.get("a") is None
