"""
Private LRU cache storage for tree implementations.

Trees whose child lookups are expensive (directory listings, remote calls)
memoise them here. The interface is a plain key -> value lookup; the eviction
policy is least-recently-used with an entry-count limit.
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)

_MISSING = object()


class _LruCacheStore:
    """
    Private cache storage with LRU eviction.

    This class encapsulates all cache storage operations including:
    - Get/put with LRU ordering
    - Entry count limits
    - Path-based invalidation
    - Statistics tracking

    Supports two modes:
    - Bounded mode (max_entries set): evicts the least recently used entry
    - Unbounded mode (max_entries=None): never evicts
    """

    def __init__(self, max_entries: Optional[int] = 10):
        """
        Initialize cache storage.

        Args:
            max_entries: Maximum number of cache entries (None = unbounded)
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be positive or None, got {max_entries}")
        self.max_entries = max_entries
        self.cache: 'OrderedDict[Hashable, Any]' = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        """
        Get a cache entry, updating LRU order.

        Args:
            key: Cache key
            default: Returned when the key is not cached

        Returns:
            Cached value or default
        """
        if key not in self.cache:
            self.misses += 1
            return default

        self.hits += 1
        self.cache.move_to_end(key)
        return self.cache[key]

    def put(self, key: Hashable, value: Any) -> None:
        """
        Store a cache entry, evicting the oldest entries if needed.

        Args:
            key: Cache key
            value: Value to cache
        """
        self.cache[key] = value
        self.cache.move_to_end(key)

        if self.max_entries is not None:
            while len(self.cache) > self.max_entries:
                self._evict_oldest()

    def get_or_compute(self, key: Hashable, compute: Callable[[Hashable], Any]) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        Args:
            key: Cache key
            compute: Function(key) -> value, called only on a miss

        Returns:
            Cached or freshly computed value
        """
        value = self.get(key, _MISSING)
        if value is _MISSING:
            value = compute(key)
            self.put(key, value)
        return value

    def invalidate(self, pattern: Any = None, deep: bool = False) -> int:
        """
        Invalidate cache entries matching a path pattern.

        Args:
            pattern: Path (or path string) to match (None = invalidate all)
            deep: If True, also invalidate all entries below pattern

        Returns:
            Number of entries invalidated
        """
        if pattern is None:
            count = len(self.cache)
            self.clear()
            logger.debug("Invalidated all %d cache entries", count)
            return count

        pattern_path = Path(pattern)
        to_remove = [
            key for key in self.cache
            if self._path_matches(Path(str(key)), pattern_path, deep)
        ]
        for key in to_remove:
            del self.cache[key]

        logger.debug("Invalidated %d cache entries under %s (deep=%s)",
                     len(to_remove), pattern_path, deep)
        return len(to_remove)

    def clear(self) -> None:
        """Clear all cache entries."""
        self.cache.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache metrics
        """
        stats = {
            'entries': len(self.cache),
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
        }

        total_attempts = self.hits + self.misses
        if total_attempts > 0:
            stats['hit_rate'] = self.hits / total_attempts

        return stats

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry."""
        if not self.cache:
            return
        oldest_key, _ = self.cache.popitem(last=False)
        self.evictions += 1
        logger.debug("Evicted cache entry %s", oldest_key)

    def _path_matches(self, key_path: Path, pattern_path: Path, deep: bool) -> bool:
        """
        Check if a path matches the invalidation pattern.

        Args:
            key_path: Path from cache key
            pattern_path: Pattern to match against
            deep: If True, match all descendants

        Returns:
            True if matches, False otherwise
        """
        if key_path == pattern_path:
            return True
        return deep and pattern_path in key_path.parents

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.cache
