"""Utility module for TTL parsing, configuration and time."""

from .clock import Clock, now_ms
from .config import CacheConfig
from .duration import ACCEPTED_FORMATS, Duration, InvalidDurationFormat, resolve_ttl

__all__ = [
    "ACCEPTED_FORMATS",
    "CacheConfig",
    "Clock",
    "Duration",
    "InvalidDurationFormat",
    "now_ms",
    "resolve_ttl",
]
