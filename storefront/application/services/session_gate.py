# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.users.entities import Credential, SessionToken
from storefront.domain.users.exceptions import InvalidCredentialsError, MalformedSessionError
from storefront.domain.users.gate import GateDecision, RouteGate
from storefront.domain.users.repositories import CredentialStore, SessionTokenCodec
from storefront.shared.logging import logger


@dataclass(slots=True, frozen=True)
class SessionGrant:
    credential: Credential
    session: SessionToken
    token: str


class SessionGate:
    """Login, session lookup and per-request routing decisions.

    Cookie reads and writes stay in the HTTP layer; this class only deals
    with the cookie value.
    """

    def __init__(
        self,
        *,
        credentials: CredentialStore,
        codec: SessionTokenCodec,
        routes: RouteGate,
    ) -> None:
        self._credentials = credentials
        self._codec = codec
        self._routes = routes

    @property
    def login_path(self) -> str:
        return self._routes.login_path

    def authenticate(self, username: str, password: str) -> SessionGrant:
        credential = self._credentials.find_match(username, password)
        if credential is None:
            raise InvalidCredentialsError()

        session = SessionToken.for_credential(credential)
        return SessionGrant(credential=credential, session=session, token=self._codec.encode(session))

    def current_session(self, cookie_value: str | None) -> SessionToken | None:
        if not cookie_value:
            return None
        try:
            return self._codec.decode(cookie_value)
        except MalformedSessionError:
            logger.debug("auth.session: rejected malformed or expired session cookie")
            return None

    def is_protected(self, path: str) -> bool:
        return self._routes.is_protected(path)

    def guard(
        self,
        path: str,
        has_valid_session: bool,
        redirect_target: str | None = None,
    ) -> GateDecision:
        return self._routes.guard(path, has_valid_session, redirect_target)

    def post_login_target(self, saved_target: str | None) -> str:
        return self._routes.post_login_target(saved_target)


__all__ = ["SessionGate", "SessionGrant"]
