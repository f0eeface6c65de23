# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Request, Response

from storefront.shared.config import AppConfig


def read_session_cookie(req: Request, config: AppConfig) -> str | None:
    return req.cookies.get(config.security.auth_cookie_name) or None


def set_session_cookie(response: Response, token: str, config: AppConfig) -> None:
    response.set_cookie(
        config.security.auth_cookie_name,
        token,
        max_age=config.security.session_lifetime,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.cookie_secure,
    )


def clear_session_cookie(response: Response, config: AppConfig) -> None:
    response.delete_cookie(
        config.security.auth_cookie_name,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.cookie_secure,
    )


__all__ = ["clear_session_cookie", "read_session_cookie", "set_session_cookie"]
