__all__ = ("LFUCacheError", "InvalidCapacity")


class LFUCacheError(Exception): ...


class InvalidCapacity(LFUCacheError, ValueError): ...
