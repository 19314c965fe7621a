# Copyright (c) 2026 Seasonkit
# SPDX-License-Identifier: MIT

"""
Bounded memoization for conversions and classifications.

Keys are tuples of a kind tag plus rounded numeric inputs, so floating noise
below the rounding precision maps to the same entry. Capacity is fixed; when
full, one entry is evicted per insert:

- LRU (default): the least recently used entry (hits refresh recency)
- FIFO: the oldest inserted entry, regardless of hits

A single lock guards the map, so one cache may be shared across threads.
Callers that switch illuminant must include the illuminant name in the key
(the converter and classifier always do).
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Hashable, TypeVar

from seasonkit.errors import ConfigurationError

T = TypeVar("T")


class EvictionPolicy(Enum):
    """Which entry leaves a full cache."""
    LRU = "lru"
    FIFO = "fifo"


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Snapshot of cache counters."""
    hits: int
    misses: int
    size: int
    capacity: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


def make_key(kind: str, *values: Any, digits: int = 6) -> tuple:
    """
    Build a cache key from a kind tag and numeric inputs.

    Floats are rounded to `digits` decimals; other hashable values pass
    through unchanged.
    """
    parts: list[Hashable] = [kind]
    for value in values:
        if isinstance(value, float):
            # +0.0 avoids distinct keys for -0.0 and 0.0
            parts.append(round(value, digits) + 0.0)
        else:
            parts.append(value)
    return tuple(parts)


class ReferenceCache:
    """
    Thread-safe bounded map with LRU or FIFO eviction.

    Args:
        capacity: Maximum number of entries (>= 1)
        policy: Eviction policy (default LRU)
    """

    def __init__(
        self,
        capacity: int = 1000,
        policy: EvictionPolicy = EvictionPolicy.LRU,
    ) -> None:
        if capacity < 1:
            raise ConfigurationError(f"Cache capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._policy = EvictionPolicy(policy)
        self._data: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> EvictionPolicy:
        return self._policy

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._data

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value or `default`, counting a hit or miss."""
        with self._lock:
            if key in self._data:
                self._hits += 1
                if self._policy is EvictionPolicy.LRU:
                    self._data.move_to_end(key)
                return self._data[key]
            self._misses += 1
            return default

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or replace an entry, evicting one entry if over capacity."""
        with self._lock:
            if key in self._data:
                self._data[key] = value
                if self._policy is EvictionPolicy.LRU:
                    self._data.move_to_end(key)
                return
            self._data[key] = value
            if len(self._data) > self._capacity:
                self._data.popitem(last=False)

    def get_or_compute(self, key: Hashable, compute: Callable[[], T]) -> T:
        """
        Return the cached value for `key`, computing and storing it on a miss.

        `compute` runs outside the lock; two threads missing the same key may
        both compute, and the results are equal because the work is pure.
        """
        sentinel = _MISSING
        value = self.get(key, sentinel)
        if value is not sentinel:
            return value
        value = compute()
        self.put(key, value)
        return value

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        """Current counters."""
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._data),
                capacity=self._capacity,
            )


_MISSING = object()
