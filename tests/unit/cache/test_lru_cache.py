from __future__ import annotations

import pytest

from classlint.cache import LRUCache


def test_least_recently_used_entry_is_evicted() -> None:
    cache: LRUCache[str, int] = LRUCache(capacity=2)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1

    cache.set("c", 3)

    assert "b" not in cache
    assert cache.keys() == ["a", "c"]
    assert len(cache) == 2


def test_set_refreshes_existing_key() -> None:
    cache: LRUCache[str, int] = LRUCache(capacity=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)
    cache.set("c", 3)

    assert cache.get("a") == 10
    assert cache.get("b") is None
    assert cache.get("b", -1) == -1


def test_clear_and_capacity_validation() -> None:
    cache: LRUCache[str, int] = LRUCache(capacity=3)
    cache.set("a", 1)
    cache.clear()
    assert len(cache) == 0
    assert cache.capacity == 3

    with pytest.raises(ValueError):
        LRUCache(capacity=0)
