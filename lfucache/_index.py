from __future__ import annotations

from typing import Dict, Generic, Iterator, Optional, TypeVar

from lfucache._models import CacheEntry

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["KeyIndex"]


class KeyIndex(Generic[K, V]):
    """Maps each cached key to its entry (value and current frequency)."""

    def __init__(self) -> None:
        self._entries: Dict[K, CacheEntry[K, V]] = {}

    def lookup(self, key: K) -> Optional[CacheEntry[K, V]]:
        return self._entries.get(key)

    def insert(self, entry: CacheEntry[K, V]) -> None:
        if entry.key in self._entries:
            raise ValueError(f"Key {entry.key!r} is already indexed")
        self._entries[entry.key] = entry

    def remove(self, key: K) -> CacheEntry[K, V]:
        return self._entries.pop(key)

    def clear(self) -> None:
        self._entries.clear()

    def __getitem__(self, key: K) -> CacheEntry[K, V]:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        yield from self._entries
