from __future__ import annotations

from collections import OrderedDict
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

K = TypeVar("K")

__all__ = ["FrequencyBuckets"]


class FrequencyBuckets(Generic[K]):
    """
    Keys grouped by access frequency.

    Each bucket is an ordered mapping whose first item is the least recently
    touched key and whose last item is the most recently touched one, so a key
    can be unlinked from the middle of its bucket in O(1) using the key itself.
    Buckets that run out of keys are deleted.
    """

    def __init__(self) -> None:
        self._buckets: Dict[int, OrderedDict[K, None]] = {}
        self._size = 0

    def add(self, key: K, frequency: int) -> None:
        bucket = self._buckets.get(frequency)
        if bucket is None:
            bucket = self._buckets[frequency] = OrderedDict()
        bucket[key] = None
        self._size += 1

    def discard(self, key: K, frequency: int) -> bool:
        """
        Remove `key` from the bucket at `frequency`.

        Returns True when the bucket became empty and was dropped.
        """
        bucket = self._buckets[frequency]
        del bucket[key]
        self._size -= 1
        if not bucket:
            del self._buckets[frequency]
            return True
        return False

    def promote(self, key: K, frequency: int) -> Tuple[int, bool]:
        emptied = self.discard(key, frequency)
        frequency += 1
        self.add(key, frequency)
        return frequency, emptied

    def pop_least_recent(self, frequency: int) -> K:
        bucket = self._buckets[frequency]
        key, _ = bucket.popitem(last=False)
        self._size -= 1
        if not bucket:
            del self._buckets[frequency]
        return key

    def lowest(self) -> Optional[int]:
        # Linear in the number of distinct frequencies, only needed after explicit removal
        if not self._buckets:
            return None
        return min(self._buckets)

    def keys_at(self, frequency: int) -> Tuple[K, ...]:
        bucket = self._buckets.get(frequency)
        if bucket is None:
            return ()
        return tuple(reversed(bucket))

    def frequencies(self) -> List[int]:
        return sorted(self._buckets)

    def clear(self) -> None:
        self._buckets.clear()
        self._size = 0

    def __contains__(self, frequency: object) -> bool:
        return frequency in self._buckets

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        buckets = ", ".join(f"{freq}: {list(self.keys_at(freq))!r}" for freq in self.frequencies())
        return f"{type(self).__name__}({{{buckets}}})"
