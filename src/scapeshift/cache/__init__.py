"""Cache stores implementing the fetch-or-compute contract."""

from .stores import (
    STORES,
    CacheStore,
    DiskStore,
    MemoryStore,
    NullStore,
    build_store,
)

__all__ = [
    "STORES",
    "CacheStore",
    "DiskStore",
    "MemoryStore",
    "NullStore",
    "build_store",
]
