from __future__ import annotations

import inspect
import logging
import typing as t
from dataclasses import dataclass

from memo_cache.cache.store import CacheStore
from memo_cache.utils.duration import Duration, resolve_ttl

from .registry import InFlight, NamespaceRegistry, get_default_registry

_logger = logging.getLogger(__name__)

T = t.TypeVar("T")

Work = t.Union[t.Awaitable[T], t.Callable[[], t.Awaitable[T]]]

_MISSING = object()


@dataclass(frozen=True)
class CacheOptions:
    key: str
    ttl: Duration


def _coerce_options(options: t.Union[CacheOptions, t.Mapping[str, t.Any]]) -> CacheOptions:
    if isinstance(options, CacheOptions):
        return options
    try:
        return CacheOptions(key=options["key"], ttl=options["ttl"])
    except (KeyError, TypeError) as exc:
        raise TypeError("options must be CacheOptions or a mapping with 'key' and 'ttl'") from exc


def _discard(work: t.Any) -> None:
    # A coroutine that will never be awaited is closed to avoid a RuntimeWarning.
    # Tasks and futures are left running; their owner decides what to do with them.
    if inspect.iscoroutine(work):
        work.close()


async def _run(work: Work[T]) -> T:
    if inspect.isawaitable(work):
        return await work
    return await work()


async def _compute_and_store(store: CacheStore, work: Work[T], options: CacheOptions) -> T:
    result = await _run(work)
    # TTL is resolved after the work completes; a bad TTL drops the result.
    ttl_ms = resolve_ttl(options.ttl)
    store.set(options.key, result, ttl_ms)
    return result


async def with_cache(
    work: Work[T],
    options: t.Union[CacheOptions, t.Mapping[str, t.Any]],
    namespace: t.Optional[str] = None,
    *,
    registry: t.Optional[NamespaceRegistry] = None,
) -> T:
    """Return the cached value for `options.key`, or await `work` and cache it.

    `work` may be an awaitable or a zero-argument callable returning one; the
    callable is only invoked on a miss. Failures of `work` and of TTL parsing
    propagate unchanged and leave the key uncached.
    """
    if not (inspect.isawaitable(work) or callable(work)):
        raise TypeError("work must be an awaitable or a callable returning an awaitable")
    opts = _coerce_options(options)
    registry = registry or get_default_registry()
    store = registry.get_store(namespace)

    cached = store.get(opts.key, _MISSING)
    if cached is not _MISSING:
        registry.metrics.record_request(store.namespace, hit=True)
        _logger.debug("Cache hit namespace=%s key=%s", store.namespace, opts.key)
        _discard(work)
        return t.cast(T, cached)

    registry.metrics.record_request(store.namespace, hit=False)
    _logger.debug("Cache miss namespace=%s key=%s", store.namespace, opts.key)
    if not registry.config.single_flight:
        return await _compute_and_store(store, work, opts)

    flight_key = (store.namespace, opts.key)
    flight = registry.inflight.get(flight_key)
    if flight is not None:
        _logger.debug("Waiting on in-flight computation namespace=%s key=%s", store.namespace, opts.key)
        await flight.done.wait()
        if flight.error is not None:
            _discard(work)
            raise flight.error
        if flight.has_result:
            _discard(work)
            registry.metrics.record_coalesced(store.namespace)
            return t.cast(T, flight.result)
        # Leader was cancelled before finishing; try again with our own work
        return await with_cache(work, opts, store.namespace, registry=registry)

    flight = InFlight()
    registry.inflight[flight_key] = flight
    try:
        result = await _compute_and_store(store, work, opts)
    except Exception as exc:
        flight.set_error(exc)
        raise
    else:
        flight.set_result(result)
        return result
    finally:
        if registry.inflight.get(flight_key) is flight:
            del registry.inflight[flight_key]
        flight.done.set()


def invalidate(key: str, namespace: t.Optional[str] = None, *, registry: t.Optional[NamespaceRegistry] = None) -> bool:
    """Remove one entry; returns whether it existed."""
    registry = registry or get_default_registry()
    return registry.get_store(namespace).delete(key)


def sweep_expired_entries(namespace: t.Optional[str] = None, *, registry: t.Optional[NamespaceRegistry] = None) -> int:
    registry = registry or get_default_registry()
    return registry.get_store(namespace).sweep_expired()


def clear(namespace: t.Optional[str] = None, *, registry: t.Optional[NamespaceRegistry] = None) -> None:
    registry = registry or get_default_registry()
    registry.get_store(namespace).clear()
