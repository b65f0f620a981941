"""Core module for namespace resolution and the memoizing wrapper."""

from .registry import InFlight, NamespaceRegistry, get_default_registry
from .wrapper import CacheOptions, clear, invalidate, sweep_expired_entries, with_cache

__all__ = [
    # Namespaces
    "NamespaceRegistry",
    "get_default_registry",
    "InFlight",
    # Memoization
    "CacheOptions",
    "with_cache",
    "invalidate",
    "sweep_expired_entries",
    "clear",
]
