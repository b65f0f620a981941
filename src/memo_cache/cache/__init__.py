from .store import CacheEntry, CacheStore

__all__ = ["CacheEntry", "CacheStore"]
