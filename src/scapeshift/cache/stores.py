"""Fetch-or-compute cache stores for Gatherer responses.

Every store exposes ``fetch(key, compute)``: on a miss ``compute()`` is
called once and its value stored; on a hit the stored value is returned
without calling ``compute``.
"""

import threading
from collections import OrderedDict
from pathlib import Path
from typing import Any, Callable, Hashable, Optional, Protocol, Union

from diskcache import Cache

from scapeshift.errors import ConfigurationError


class CacheStore(Protocol):
    """Anything the Gatherer client can cache through."""

    def fetch(self, key: Hashable, compute: Callable[[], Any]) -> Any: ...


class MemoryStore:
    """In-process store, optionally bounded as an LRU."""

    def __init__(self, max_size: Optional[int] = None):
        """Initialize store.

        Args:
            max_size: Maximum number of entries (None for unbounded)
        """
        if max_size is not None and max_size < 1:
            raise ConfigurationError("max_size must be at least 1")
        self.max_size = max_size
        self.cache: "OrderedDict[Hashable, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self._lock = threading.RLock()

    def fetch(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self.cache:
                self.cache.move_to_end(key)
                self.hits += 1
                return self.cache[key]

            self.misses += 1
            value = compute()

            if self.max_size is not None and len(self.cache) >= self.max_size:
                self.cache.popitem(last=False)
            self.cache[key] = value
            return value

    def __contains__(self, key: Hashable) -> bool:
        return key in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self.cache.clear()
            self.hits = 0
            self.misses = 0

    def get_stats(self) -> dict:
        """Get cache statistics."""
        total = self.hits + self.misses
        hit_rate = (self.hits / total * 100) if total > 0 else 0

        return {
            "size": len(self.cache),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": f"{hit_rate:.1f}%",
        }


class NullStore:
    """Store that never stores: every fetch recomputes."""

    def fetch(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        return compute()

    def __len__(self) -> int:
        return 0

    def clear(self) -> None:
        pass


class DiskStore:
    """Persistent store backed by diskcache."""

    def __init__(
        self,
        directory: Union[str, Path] = ".cache/gatherer",
        expire: Optional[float] = None,
        size_limit: int = 500_000_000,
    ):
        """Initialize store.

        Args:
            directory: Cache directory (created if missing)
            expire: Seconds before an entry expires (None keeps forever)
            size_limit: Maximum size of the cache on disk in bytes
        """
        self.directory = Path(directory)
        self.expire = expire
        self.cache = Cache(str(self.directory), size_limit=size_limit)

    def fetch(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        sentinel = object()
        value = self.cache.get(key, default=sentinel)
        if value is not sentinel:
            return value

        value = compute()
        self.cache.set(key, value, expire=self.expire)
        return value

    def __contains__(self, key: Hashable) -> bool:
        return key in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def clear(self) -> None:
        self.cache.clear()

    def close(self) -> None:
        self.cache.close()


STORES = {
    "memory": MemoryStore,
    "null": NullStore,
    "disk": DiskStore,
}


def build_store(identifier: str, **options) -> CacheStore:
    """Resolve a store identifier to a store instance.

    Args:
        identifier: One of "memory", "null" or "disk"
        **options: Store-specific constructor arguments

    Raises:
        ConfigurationError: If the identifier is unknown
    """
    try:
        store_class = STORES[identifier.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unknown cache store: {identifier!r}. Must be one of {sorted(STORES)}"
        ) from None
    return store_class(**options)
