#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "lfucache",
# ]
#
# [tool.uv.sources]
# lfucache = { path = "../", editable = true }
# ///

import logging

from lfucache import LFUCache

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def one_capacity() -> None:
    cache: LFUCache[int, int] = LFUCache(1, default_factory=int)
    assert cache.empty()

    cache.put(1, 1)
    assert cache.get(1) == 1

    cache.put(2, 2)
    assert cache.size() == 1
    assert not cache.contains(1)
    assert cache.contains(2)
    assert cache.get(2) == 2

    # a miss stores the default value and evicts the only entry
    assert cache.get(3) == 0
    assert not cache.contains(2)
    assert cache.contains(3)


def tie_break_by_recency() -> None:
    cache: LFUCache[int, int] = LFUCache(3)

    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(3, 3)
    cache.get(3)

    cache.put(4, 4)
    assert not cache.contains(1)
    assert cache.contains(2)
    assert cache.contains(3)
    assert cache.contains(4)


def many_capacity() -> None:
    cache: LFUCache[int, int] = LFUCache(3)

    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(2, 4)
    cache.put(3, 3)
    assert cache.get(2) == 4

    cache.put(4, 4)  # 1 and 3 are both used once, 1 is older
    assert not cache.contains(1)

    cache.put(4, 5)
    cache.put(5, 5)  # 3 is used once, everything else more often
    assert not cache.contains(3)
    assert cache.get(5) == 5
    assert cache.size() == 3


def miss_fills_default() -> None:
    cache: LFUCache[int, int] = LFUCache(3, default_factory=int)

    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(3, 3)

    assert cache.get(4) == 0
    assert not cache.contains(1)
    assert cache.contains(4)
    assert cache.peek(5) is None
    assert not cache.contains(5)


if __name__ == "__main__":
    for scenario in (one_capacity, tie_break_by_recency, many_capacity, miss_fills_default):
        scenario()
        print(f"{scenario.__name__}: ok")
