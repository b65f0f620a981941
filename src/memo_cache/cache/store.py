from __future__ import annotations

import logging
import typing as t
from dataclasses import dataclass

from memo_cache.monitoring.metrics import CacheMetrics
from memo_cache.utils.clock import Clock, now_ms

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    value: t.Any
    expires: int  # epoch milliseconds

    def is_expired(self, now: int) -> bool:
        # Still live at exactly `expires`
        return now > self.expires


class CacheStore:
    """Key -> entry table for one namespace, with lazy TTL expiration.

    Expired entries are only removed when `get` finds them or when
    `sweep_expired` is called; nothing runs in the background.
    """

    def __init__(
        self,
        namespace: str = "default",
        clock: t.Optional[Clock] = None,
        metrics: t.Optional[CacheMetrics] = None,
    ) -> None:
        self.namespace = namespace
        self._clock = clock or now_ms
        self._metrics = metrics or CacheMetrics()
        self._store: t.Dict[str, CacheEntry] = {}

    def get(self, key: str, default: t.Any = None) -> t.Any:
        entry = self._store.get(key)
        if entry is None:
            return default
        if entry.is_expired(self._clock()):
            del self._store[key]
            self._metrics.record_eviction(self.namespace, "expired")
            _logger.debug("Expired entry namespace=%s key=%s", self.namespace, key)
            return default
        return entry.value

    def set(self, key: str, value: t.Any, ttl_ms: int) -> None:
        self._store[key] = CacheEntry(value=value, expires=self._clock() + ttl_ms)

    def delete(self, key: str) -> bool:
        if self._store.pop(key, None) is None:
            return False
        self._metrics.record_eviction(self.namespace, "invalidated")
        return True

    def sweep_expired(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._store.items() if entry.is_expired(now)]
        for key in expired:
            del self._store[key]
        self._metrics.record_eviction(self.namespace, "expired", len(expired))
        _logger.debug("Swept %d expired entries from namespace=%s", len(expired), self.namespace)
        return len(expired)

    def clear(self) -> None:
        removed = len(self._store)
        self._store.clear()
        self._metrics.record_eviction(self.namespace, "cleared", removed)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __repr__(self) -> str:
        return f"CacheStore(namespace={self.namespace!r}, entries={len(self._store)})"
