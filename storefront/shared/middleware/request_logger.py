# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time
from collections.abc import Mapping

from flask import Flask, Response, g, request

from storefront.shared.logging import (clear_correlation_id, get_correlation_id,
                                       logger, set_correlation_id)

REQUEST_ID_HEADER = "X-Request-ID"

_MASKED_HEADERS = frozenset({"authorization", "cookie", "set-cookie", "x-api-key"})
_MASKED_PARAM_HINTS = ("password", "token", "secret", "key")


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: ("<masked>" if name.lower() in _MASKED_HEADERS else value)
        for name, value in headers.items()
    }


def masked_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        name: ("<masked>" if any(hint in name.lower() for hint in _MASKED_PARAM_HINTS) else value)
        for name, value in params.items()
    }


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    # Caller-supplied ids end up in every log line; keep them short.
    return supplied[:64] if supplied else secrets.token_hex(6)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """Log one line per request on entry and exit, tagged with a correlation id.

    The id is taken from ``X-Request-ID`` when the caller sends one and is
    echoed back on the response. With ``debug_mode`` the entry line also
    carries masked headers and query parameters.
    """

    @app.before_request
    def _open_request_log() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"http.request: {request.method} {request.path} from {client_ip()} "
                f"query={masked_params(request.args)} headers={masked_headers(request.headers)}"
            )
        else:
            logger.info(f"http.request: {request.method} {request.path} from {client_ip()}")

    @app.after_request
    def _close_request_log(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        session = g.get("auth_session")
        logger.info(
            f"http.response: {request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f} ms user={session.user_id if session else '-'}"
        )
        return response

    @app.teardown_request
    def _end_request_log(exc: BaseException | None) -> None:
        if exc is not None:
            logger.opt(exception=exc if debug_mode else None).error(
                f"http.error: {type(exc).__name__} on {request.method} {request.path}"
            )
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging", "masked_headers", "masked_params"]
