from lfucache._buckets import FrequencyBuckets as FrequencyBuckets
from lfucache._exceptions import InvalidCapacity as InvalidCapacity, LFUCacheError as LFUCacheError
from lfucache._index import KeyIndex as KeyIndex
from lfucache._lfu_cache import LFUCache as LFUCache
from lfucache._models import CacheEntry as CacheEntry

__all__ = (
    # Cache
    "LFUCache",
    # Building blocks
    "CacheEntry",
    "FrequencyBuckets",
    "KeyIndex",
    # Exceptions
    "LFUCacheError",
    "InvalidCapacity",
)

__version__ = "0.1.0"
