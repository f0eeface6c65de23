# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from storefront.domain.users.entities import Credential, Role


def _same(left: str, right: str) -> bool:
    return secrets.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


class StaticCredentialStore:
    """Holds the single admin identity configured at start-up."""

    def __init__(self, *, username: str, password: str, user_id: int = 1) -> None:
        self._credential = Credential(id=user_id, username=username, password=password, role=Role.ADMIN)

    def find_match(self, username: str, password: str) -> Credential | None:
        # Both comparisons always run.
        username_ok = _same(username, self._credential.username)
        password_ok = _same(password, self._credential.password)
        if username_ok and password_ok:
            return self._credential
        return None
