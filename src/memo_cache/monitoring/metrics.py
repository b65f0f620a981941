from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        self.values[key] = self.values.get(key, 0.0) + value

    def get(self, **labels: Any) -> float:
        key = tuple(sorted(labels.items()))
        return self.values.get(key, 0.0)

    def reset(self) -> None:
        self.values.clear()


@dataclass
class CacheMetrics:
    """Counters shared by every store of one registry."""

    enabled: bool = True
    requests: Counter = field(
        default_factory=lambda: Counter("memo_cache_requests_total", "Lookups by namespace and hit/miss")
    )
    evictions: Counter = field(
        default_factory=lambda: Counter("memo_cache_evictions_total", "Removed entries by namespace and reason")
    )
    coalesced: Counter = field(
        default_factory=lambda: Counter("memo_cache_coalesced_total", "Callers served by an in-flight computation")
    )

    def record_request(self, namespace: str, hit: bool) -> None:
        if self.enabled:
            self.requests.inc(namespace=namespace, result="hit" if hit else "miss")

    def record_eviction(self, namespace: str, reason: str, count: int = 1) -> None:
        if self.enabled and count:
            self.evictions.inc(count, namespace=namespace, reason=reason)

    def record_coalesced(self, namespace: str) -> None:
        if self.enabled:
            self.coalesced.inc(namespace=namespace)

    def hit_ratio(self, namespace: str) -> float:
        hits = self.requests.get(namespace=namespace, result="hit")
        misses = self.requests.get(namespace=namespace, result="miss")
        total = hits + misses
        return hits / total if total else 0.0
