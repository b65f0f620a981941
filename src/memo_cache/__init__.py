"""memo_cache

An in-process memoization layer for asyncio code: awaitable results are cached
per namespace under a caller-supplied key for a fixed TTL, with lazy expiry.
"""

from .cache import CacheEntry, CacheStore
from .core import (
    CacheOptions,
    NamespaceRegistry,
    clear,
    get_default_registry,
    invalidate,
    sweep_expired_entries,
    with_cache,
)
from .monitoring import CacheMetrics
from .utils import CacheConfig, InvalidDurationFormat, resolve_ttl

__all__ = [
    "with_cache",
    "invalidate",
    "sweep_expired_entries",
    "clear",
    "CacheOptions",
    "CacheStore",
    "CacheEntry",
    "NamespaceRegistry",
    "get_default_registry",
    "resolve_ttl",
    "InvalidDurationFormat",
    "CacheConfig",
    "CacheMetrics",
]

__version__ = "0.1.0"
