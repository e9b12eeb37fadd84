"""
Tests for _LruCacheStore - the listing cache used by FileSystemTree.

This test suite ensures the cache store correctly handles:
- Basic get/put operations
- LRU eviction
- Unbounded mode
- Path-based invalidation
- Statistics tracking
"""

from pathlib import Path

import pytest

from axistreelib.trees._cache_store import _LruCacheStore


class TestLruCacheStoreBasics:
    """Test basic cache operations."""

    def test_get_missing_returns_default(self):
        store = _LruCacheStore()
        assert store.get("absent") is None
        assert store.get("absent", 42) == 42
        assert store.misses == 2

    def test_put_then_get(self):
        store = _LruCacheStore()
        store.put("key", [1, 2])
        assert store.get("key") == [1, 2]
        assert "key" in store
        assert len(store) == 1

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            _LruCacheStore(max_entries=0)

    def test_get_or_compute_computes_once(self):
        store = _LruCacheStore()
        calls = []

        def compute(key):
            calls.append(key)
            return key.upper()

        assert store.get_or_compute("a", compute) == "A"
        assert store.get_or_compute("a", compute) == "A"
        assert calls == ["a"]


class TestLruEviction:
    """Test least-recently-used eviction."""

    def test_evicts_least_recently_used(self):
        store = _LruCacheStore(max_entries=2)
        store.put("a", 1)
        store.put("b", 2)
        store.get("a")
        store.put("c", 3)
        assert "a" in store and "c" in store
        assert "b" not in store
        assert store.evictions == 1

    def test_unbounded_never_evicts(self):
        store = _LruCacheStore(max_entries=None)
        for i in range(100):
            store.put(i, i)
        assert len(store) == 100
        assert store.evictions == 0


class TestInvalidation:
    """Test path-based invalidation."""

    def setup_method(self):
        self.store = _LruCacheStore(max_entries=None)
        for path in ("/data", "/data/a", "/data/a/b", "/other"):
            self.store.put(Path(path), [])

    def test_exact_path(self):
        assert self.store.invalidate("/data/a") == 1
        assert Path("/data/a/b") in self.store

    def test_deep(self):
        assert self.store.invalidate(Path("/data"), deep=True) == 3
        assert list(self.store.cache) == [Path("/other")]

    def test_everything(self):
        assert self.store.invalidate() == 4
        assert len(self.store) == 0


def test_stats():
    store = _LruCacheStore()
    assert 'hit_rate' not in store.get_stats()
    store.put("a", 1)
    store.get("a")
    store.get("b")
    stats = store.get_stats()
    assert stats == {'entries': 1, 'hits': 1, 'misses': 1, 'evictions': 0, 'hit_rate': 0.5}
