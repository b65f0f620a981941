from __future__ import annotations

import logging
import typing as t

import anyio

from memo_cache.cache.store import CacheStore
from memo_cache.monitoring.metrics import CacheMetrics
from memo_cache.utils.clock import Clock, now_ms
from memo_cache.utils.config import CacheConfig

_logger = logging.getLogger(__name__)


class InFlight:
    """A miss currently being computed by a leader, awaited by other callers."""

    def __init__(self) -> None:
        self.done = anyio.Event()
        self.has_result = False
        self.result: t.Any = None
        self.error: t.Optional[BaseException] = None

    def set_result(self, value: t.Any) -> None:
        self.result = value
        self.has_result = True

    def set_error(self, exc: BaseException) -> None:
        self.error = exc


class NamespaceRegistry:
    """Maps each namespace label to exactly one CacheStore.

    Stores are created on first reference and never removed, so repeated
    lookups of a namespace always return the identical instance.
    """

    def __init__(self, config: t.Optional[CacheConfig] = None, clock: t.Optional[Clock] = None) -> None:
        self.config = config or CacheConfig()
        self.metrics = CacheMetrics(enabled=self.config.metrics_enabled)
        self._clock = clock or now_ms
        self._stores: t.Dict[str, CacheStore] = {}
        self.inflight: t.Dict[t.Tuple[str, str], InFlight] = {}

    def get_store(self, namespace: t.Optional[str] = None) -> CacheStore:
        if namespace is None:
            namespace = self.config.default_namespace
        store = self._stores.get(namespace)
        if store is None:
            store = CacheStore(namespace, clock=self._clock, metrics=self.metrics)
            self._stores[namespace] = store
            _logger.debug("Created cache store for namespace=%s", namespace)
        return store

    def namespaces(self) -> t.List[str]:
        return list(self._stores)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._stores


_default_registry: t.Optional[NamespaceRegistry] = None


def get_default_registry() -> NamespaceRegistry:
    """Process-wide registry used when no registry is passed explicitly."""
    global _default_registry
    if _default_registry is None:
        _default_registry = NamespaceRegistry()
    return _default_registry
