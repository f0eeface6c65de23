# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.shared.logging import logger

from .base import AppError

API_PREFIX = "/api/"


def error_body(message: str, details: list[str] | None = None) -> dict[str, object]:
    body: dict[str, object] = {"success": False, "error": message}
    if details:
        body["details"] = details
    return body


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    """Render every failure as ``{"success": false, "error": ...}``.

    Werkzeug HTTP errors keep their status; under ``/api/`` they are turned
    into the same JSON envelope, elsewhere they render as Werkzeug does.
    """

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        log = logger.warning if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else logger.info
        log(f"http.app_error: {exc.code} ({int(exc.status)}) on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if not request.path.startswith(API_PREFIX) or exc.code is None:
            return exc
        return jsonify(error_body(exc.name)), exc.code

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)
        if debug_mode:
            logger.opt(exception=exc).error(
                f"http.unhandled: {request.method} {request.path} user={user_id} "
                f"query={dict(request.args)} body_size={request.content_length or 0}"
            )
        else:
            logger.error(f"http.unhandled: {type(exc).__name__} on {request.method} {request.path}")
        return jsonify(error_body("Internal server error")), default_status


__all__ = ["API_PREFIX", "error_body", "handle_app_error", "register_error_handler"]
