# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from flask import Flask, g, redirect, request

from storefront.application.services.session_gate import SessionGate
from storefront.domain.users.entities import Role, SessionToken
from storefront.domain.users.gate import RedirectTo
from storefront.interfaces.http.session_cookie import read_session_cookie
from storefront.shared.config import AppConfig
from storefront.shared.errors.base import AppError
from storefront.shared.logging import logger


class AdminAccessDeniedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="admin_access_denied",
            status=HTTPStatus.FORBIDDEN,
            message="Admin access required",
        )


class AdminAuthenticationError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="admin_authentication_required",
            status=HTTPStatus.UNAUTHORIZED,
            message="Authentication required",
        )


def current_session() -> SessionToken | None:
    return getattr(g, "auth_session", None)


def configure_session_gate(app: Flask, gate: SessionGate, config: AppConfig) -> None:
    """Run the route gate before every request and expose the session on ``g``."""

    @app.before_request
    def _gate_request():
        session = gate.current_session(read_session_cookie(request, config))
        g.auth_session = session
        g.user_id = session.user_id if session else None

        decision = gate.guard(request.path, session is not None, request.args.get("redirect"))
        if isinstance(decision, RedirectTo):
            logger.info(
                f"auth.gate: {request.method} {request.path} -> {decision.location}"
            )
            return redirect(decision.location, code=HTTPStatus.TEMPORARY_REDIRECT)
        return None


def require_admin(func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        session = current_session()

        if session is None:
            logger.warning(f"Admin access denied: no session on {request.method} {request.path}")
            raise AdminAuthenticationError()

        if session.role != Role.ADMIN.value:
            logger.warning(f"Admin access denied: user {session.user_id} is not admin")
            raise AdminAccessDeniedError()

        return func(*args, **kwargs)

    return wrapper


__all__ = [
    "AdminAccessDeniedError",
    "AdminAuthenticationError",
    "configure_session_gate",
    "current_session",
    "require_admin",
]
