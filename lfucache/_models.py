from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

__all__ = ["CacheEntry"]


@dataclass
class CacheEntry(Generic[K, V]):
    key: K
    value: V
    frequency: int = 1
    """Number of touches since insertion, starting at 1."""
