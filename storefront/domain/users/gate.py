# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Route gating rules for the admin area.

The decision is a pure function of the request path and whether the caller
holds a valid session, so it can be exercised without a request context.
Cookie handling lives in the HTTP layer.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote, urlsplit


@dataclass(slots=True, frozen=True)
class Allow:
    pass


@dataclass(slots=True, frozen=True)
class RedirectTo:
    location: str


GateDecision = Allow | RedirectTo

ALLOW = Allow()


def is_local_path(target: str | None) -> bool:
    """Only same-origin absolute paths are accepted as post-login targets."""

    if not target or not target.startswith("/"):
        return False
    # Browsers and Werkzeug drop control characters and whitespace from Location.
    if any(ch.isspace() or not ch.isprintable() for ch in target) or "\\" in target:
        return False
    parts = urlsplit(target)
    return not (parts.scheme or parts.netloc or target.startswith("//"))


class RouteGate:
    def __init__(
        self,
        *,
        protected_prefixes: Iterable[str],
        auth_routes: Iterable[str],
        login_path: str = "/login",
        default_redirect: str = "/admin",
    ) -> None:
        self._protected = tuple(protected_prefixes)
        self._auth_routes = frozenset(auth_routes)
        self._login_path = login_path
        self._default_redirect = default_redirect

    @property
    def login_path(self) -> str:
        return self._login_path

    def is_protected(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self._protected)

    def is_auth_route(self, path: str) -> bool:
        return path in self._auth_routes

    def login_redirect(self, original_path: str) -> RedirectTo:
        return RedirectTo(f"{self._login_path}?redirect={quote(original_path, safe='/')}")

    def post_login_target(self, saved_target: str | None) -> str:
        if is_local_path(saved_target):
            return saved_target  # type: ignore[return-value]
        return self._default_redirect

    def guard(
        self,
        path: str,
        has_valid_session: bool,
        redirect_target: str | None = None,
    ) -> GateDecision:
        if self.is_protected(path) and not has_valid_session:
            return self.login_redirect(path)

        if self.is_auth_route(path) and has_valid_session:
            return RedirectTo(self.post_login_target(redirect_target))

        return ALLOW


__all__ = ["ALLOW", "Allow", "GateDecision", "RedirectTo", "RouteGate", "is_local_path"]
