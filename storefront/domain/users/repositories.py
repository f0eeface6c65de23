# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Credential, SessionToken


class CredentialStore(Protocol):
    def find_match(self, username: str, password: str) -> Credential | None: ...


class SessionTokenCodec(Protocol):
    def encode(self, token: SessionToken) -> str: ...
    def decode(self, value: str) -> SessionToken: ...
