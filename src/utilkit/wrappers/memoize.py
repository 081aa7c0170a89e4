"""Memoization keyed by a canonical serialization of the call arguments.

Each :class:`Memoizer` owns an unbounded, append-only cache. Two memoizers
around the same function never share results.
"""

from __future__ import annotations

import functools
import json
import logging
import threading
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class CacheInfo:
    """Cache statistics for a Memoizer."""

    hits: int
    misses: int
    size: int


def _tag(value: Any) -> Any:
    """Convert `value` into a JSON-safe tree that records container types.

    Scalars that JSON already tells apart (``1``, ``1.0``, ``true``, ``"1"``,
    ``null``) are kept as-is. Containers are wrapped with their type name so a
    tuple and a list with the same items do not collide. Mapping keys are
    tagged too, since JSON object keys are always strings.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [type(value).__name__, [_tag(v) for v in value]]
    if isinstance(value, Mapping):
        return [type(value).__name__, [[_tag(k), _tag(v)] for k, v in value.items()]]
    if isinstance(value, (set, frozenset)):
        items = sorted(
            (_tag(v) for v in value), key=lambda t: json.dumps(t, sort_keys=True)
        )
        return [type(value).__name__, items]
    return [type(value).__qualname__, repr(value)]


def make_key(args: tuple[Any, ...], kwargs: Mapping[str, Any] | None = None) -> str:
    """Build the cache key for a call.

    Positional arguments keep their order; keyword arguments are sorted by
    name so ``f(a=1, b=2)`` and ``f(b=2, a=1)`` share a key.

    Example:
        >>> make_key((10,))
        '[[10], []]'
    """
    kw = sorted((kwargs or {}).items())
    return json.dumps(
        [[_tag(a) for a in args], [[k, _tag(v)] for k, v in kw]],
        ensure_ascii=False,
    )


class Memoizer(Generic[R]):
    """Cache the results of `fn` per distinct argument list.

    The check-compute-store sequence runs under a re-entrant lock, so each
    distinct key is computed at most once even with concurrent callers, and a
    memoized function may call itself recursively.

    Args:
        fn: The function to memoize.

    Note:
        The lock stays held while `fn` runs, so calls for different keys are
        serialized too. A target that blocks on another thread calling the
        same memoizer deadlocks.

        Used as a class attribute, the wrapper binds like a method. The
        instance becomes the first argument and part of the key (by type and
        ``repr``), while the cache is shared by all instances.
    """

    def __init__(self, fn: Callable[..., R]) -> None:
        self.fn = fn
        self._cache: dict[str, R] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        functools.update_wrapper(self, fn)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = make_key(args, kwargs)
        with self._lock:
            if key in self._cache:
                self._hits += 1
                logger.debug("Cache hit for %s", key)
                return self._cache[key]
            self._misses += 1
            result = self.fn(*args, **kwargs)
            self._cache[key] = result
            logger.debug("Stored in cache: %s", key)
            return result

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return types.MethodType(self, obj)

    def cache_info(self) -> CacheInfo:
        """Return hit/miss counters and the number of cached entries."""
        with self._lock:
            return CacheInfo(
                hits=self._hits, misses=self._misses, size=len(self._cache)
            )


def memoize(fn: Callable[..., R]) -> Memoizer[R]:
    """Decorator form of :class:`Memoizer`."""
    return Memoizer(fn)
