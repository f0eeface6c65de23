# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from threading import Lock
from typing import Any

from flask import jsonify, request

from storefront.shared.errors.http import error_body
from storefront.shared.logging import logger
from storefront.shared.middleware.request_logger import client_ip


class SlidingWindowLimiter:
    """Allows at most ``limit`` hits per key within any ``window_seconds`` span."""

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = Lock()
        self._hits: dict[str, deque[float]] = {}

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] > self._window:
                hits.popleft()
            if len(hits) >= self._limit:
                return False
            hits.append(now)
            return True


def rate_limit(limit: int, window_seconds: float, *, enabled: bool = True):
    """Decorate a view so each client IP is throttled per route.

    A fresh limiter is created per decoration, so every app instance keeps
    its own counters.
    """

    limiter = SlidingWindowLimiter(limit, window_seconds)

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        if not enabled:
            return view

        @wraps(view)
        def throttled(*args: Any, **kwargs: Any) -> Any:
            if not limiter.allow(f"{request.path}:{client_ip()}"):
                logger.warning(f"http.throttled: {request.method} {request.path} from {client_ip()}")
                return (
                    jsonify(error_body("Too many requests")),
                    HTTPStatus.TOO_MANY_REQUESTS,
                )
            return view(*args, **kwargs)

        return throttled

    return decorator


__all__ = ["SlidingWindowLimiter", "rate_limit"]
