"""
Two-tier memoization for humanbytes.

Each conversion direction owns one cache: a read-only table of pre-seeded
common entries, checked first, plus a bounded dynamic store that accepts
inserts until it is full and never evicts.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Mapping, Optional, TypeVar

from humanbytes.core.units import GB, KB, MB, TB

logger = logging.getLogger("humanbytes.cache")

DEFAULT_MAX_ENTRIES = 1000

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _powers(unit: int, symbol: str, counts: tuple) -> Dict[int, str]:
    return {count * unit: f"{count}{symbol}" for count in counts}


FORMAT_STATIC: Mapping[float, str] = MappingProxyType(
    {
        0: "0B",
        **_powers(KB, "KB", (1, 2, 4, 8)),
        **_powers(MB, "MB", (1, 2, 4, 8, 16, 32, 64, 128, 256, 512)),
        **_powers(GB, "GB", (1, 2, 4, 8, 16, 32, 64, 128, 256, 512)),
        **_powers(TB, "TB", (1, 2, 4, 8)),
    }
)

PARSE_STATIC: Mapping[str, int] = MappingProxyType(
    {
        "0": 0,
        **{f"{count}kb": count * KB for count in (1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024)},
        **{f"{count}mb": count * MB for count in (1, 2, 4, 8, 16, 32, 64, 128, 256, 512)},
        **{f"{count}gb": count * GB for count in (1, 2, 4, 8, 16, 32, 64, 128, 256, 512)},
        **{f"{count}tb": count * TB for count in (1, 2, 4, 8)},
    }
)


@dataclass(frozen=True)
class CacheInfo:
    """Immutable snapshot of cache statistics."""

    hits: int
    misses: int
    static_size: int
    dynamic_size: int
    max_entries: int

    @property
    def full(self) -> bool:
        return self.dynamic_size >= self.max_entries


class TwoTierCache(Generic[K, V]):
    """Static lookup table in front of a bounded, insert-only dict."""

    def __init__(
        self,
        static: Mapping[K, V],
        max_entries: int = DEFAULT_MAX_ENTRIES,
        name: str = "cache",
    ):
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.name = name
        self.max_entries = max_entries
        self._static = static
        self._dynamic: Dict[K, V] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: K) -> Optional[V]:
        """Return the cached value for ``key`` or None on a miss."""
        value = self._static.get(key)
        if value is None:
            value = self._dynamic.get(key)
        if value is None:
            self._misses += 1
        else:
            self._hits += 1
        return value

    def put(self, key: K, value: V) -> bool:
        """Insert ``key`` if the dynamic store has room. Returns True if stored."""
        with self._lock:
            if len(self._dynamic) >= self.max_entries:
                return False
            self._dynamic[key] = value
            if len(self._dynamic) == self.max_entries:
                logger.info(
                    f"{self.name} cache reached {self.max_entries} entries; "
                    "new results will not be cached"
                )
            return True

    def clear(self) -> None:
        """Empty the dynamic store and reset counters. The static table is untouched."""
        with self._lock:
            self._dynamic.clear()
            self._hits = 0
            self._misses = 0
        logger.debug(f"Cleared {self.name} cache")

    def info(self) -> CacheInfo:
        return CacheInfo(
            hits=self._hits,
            misses=self._misses,
            static_size=len(self._static),
            dynamic_size=len(self._dynamic),
            max_entries=self.max_entries,
        )

    def __len__(self) -> int:
        return len(self._dynamic)

    def __contains__(self, key: object) -> bool:
        return key in self._static or key in self._dynamic
