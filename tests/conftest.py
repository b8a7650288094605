from typing import Any, Callable

import pytest

from lfucache import LFUCache


def _check_invariants(cache: LFUCache[Any, Any]) -> None:
    index = cache._index
    buckets = cache._buckets

    assert len(index) == len(cache) == len(buckets)
    assert len(cache) <= cache.capacity

    bucketed = [key for freq in buckets.frequencies() for key in buckets.keys_at(freq)]
    assert sorted(bucketed, key=repr) == sorted(index, key=repr)

    for key in index:
        assert key in buckets.keys_at(index[key].frequency)

    if len(cache):
        assert cache.min_freq == buckets.frequencies()[0]
    else:
        assert cache.min_freq == 0


@pytest.fixture
def check_invariants() -> Callable[[LFUCache[Any, Any]], None]:
    """Asserts that the key index and the frequency buckets agree."""
    return _check_invariants
