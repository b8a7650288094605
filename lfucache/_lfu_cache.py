from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, Optional, TypeVar

from lfucache._buckets import FrequencyBuckets
from lfucache._exceptions import InvalidCapacity
from lfucache._index import KeyIndex
from lfucache._models import CacheEntry

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["LFUCache"]

logger = logging.getLogger("lfucache.cache")


class LFUCache(Generic[K, V]):
    """
    Fixed-capacity cache that evicts the least frequently used key.

    Every read or write of a cached key counts as one access. When a new key
    arrives and the cache is full, the key with the lowest access count is
    evicted; among keys with the same count, the one touched longest ago goes
    first.

    Parameters:
    ----------
    capacity : int
        Maximum number of entries. Must be a positive integer.

    default_factory : Callable[[], V]
        Produces the value that `get` stores and returns for a missing key,
        the same way `collections.defaultdict` does.

        Default: `int` (missing keys read as 0)

    Note that `get` on a missing key *inserts* that key with the default
    value, and may evict another key to make room. Use `peek` for a read
    without side effects.

    Examples:
    --------
    >>> cache = LFUCache(2)
    >>> cache.put("a", 1)
    >>> cache.get("a")
    1
    >>> cache.get("b")
    0
    >>> "b" in cache
    True

    >>> names = LFUCache(2, default_factory=str)
    >>> names.get("missing")
    ''
    """

    def __init__(self, capacity: int, default_factory: Callable[[], V] = int) -> None:  # type: ignore[assignment]
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity(f"Capacity must be positive, got {capacity!r}")

        self._capacity = capacity
        self._default_factory = default_factory
        self._index: KeyIndex[K, V] = KeyIndex()
        self._buckets: FrequencyBuckets[K] = FrequencyBuckets()
        self._min_freq = 0  # 0 only while the cache is empty

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def default_factory(self) -> Callable[[], V]:
        return self._default_factory

    @property
    def min_freq(self) -> int:
        return self._min_freq

    def contains(self, key: K) -> bool:
        return key in self._index

    def size(self) -> int:
        return len(self._index)

    def empty(self) -> bool:
        return not self._index

    def get(self, key: K) -> V:
        entry = self._index.lookup(key)
        if entry is not None:
            self._touch(entry)
            return entry.value

        value = self._default_factory()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Cache miss for {key!r}, storing the default value {value!r}")
        self.put(key, value)
        return value

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """
        Return the value for `key` without counting it as an access.
        """
        entry = self._index.lookup(key)
        if entry is None:
            return default
        return entry.value

    def frequency(self, key: K) -> int:
        entry = self._index.lookup(key)
        if entry is None:
            raise KeyError(f"Key {key!r} not found")
        return entry.frequency

    def put(self, key: K, value: V) -> None:
        entry = self._index.lookup(key)
        if entry is not None:
            entry.value = value
            self._touch(entry)
            return

        if len(self._index) == self._capacity:
            self._evict()

        self._index.insert(CacheEntry(key, value))
        self._buckets.add(key, 1)
        # A fresh key has frequency 1, which no other key can be below
        self._min_freq = 1

    def remove_key(self, key: K) -> None:
        entry = self._index.lookup(key)
        if entry is None:
            return

        self._index.remove(key)
        emptied = self._buckets.discard(key, entry.frequency)
        if emptied and entry.frequency == self._min_freq:
            lowest = self._buckets.lowest()
            self._min_freq = 0 if lowest is None else lowest

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Removed {key!r} (frequency {entry.frequency})")

    def clear(self) -> None:
        self._index.clear()
        self._buckets.clear()
        self._min_freq = 0

    def _touch(self, entry: CacheEntry[K, V]) -> None:
        new_freq, emptied = self._buckets.promote(entry.key, entry.frequency)
        if emptied and entry.frequency == self._min_freq:
            self._min_freq = new_freq
        entry.frequency = new_freq

    def _evict(self) -> None:
        evicted_key = self._buckets.pop_least_recent(self._min_freq)
        evicted = self._index.remove(evicted_key)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evicted {evicted_key!r} (frequency {evicted.frequency}) to make room for a new key")

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[K]:
        yield from self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self._index)})"
