# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from threading import Lock
from typing import Generic, NamedTuple, TypeVar

from storefront.shared.logging import logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _Cached(NamedTuple, Generic[V]):  # noqa: UP046
    value: V
    fresh_until: float


class InMemoryTTLCache(Generic[K, V]):  # noqa: UP046
    """Process-local memo for upstream reads.

    Loader failures propagate to the caller and leave the key empty, so the
    next call retries the upstream instead of serving a cached error.
    """

    def __init__(self, ttl_seconds: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._lock = Lock()
        self._entries: dict[K, _Cached[V]] = {}

    def _fresh(self, key: K) -> _Cached[V] | None:
        with self._lock:
            cached = self._entries.get(key)
            if cached is None:
                return None
            if self._clock() < cached.fresh_until:
                return cached
            del self._entries[key]
            return None

    def get_or_set(self, key: K, loader: Callable[[], V]) -> V:
        cached = self._fresh(key)
        if cached is not None:
            logger.debug(f"catalog.cache: hit key={key}")
            return cached.value

        logger.debug(f"catalog.cache: miss key={key}")
        value = loader()
        with self._lock:
            self._entries[key] = _Cached(value, self._clock() + self._ttl)
        return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        logger.debug(f"catalog.cache: cleared entries={dropped}")


__all__ = ["InMemoryTTLCache"]
