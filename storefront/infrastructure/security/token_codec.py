# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import base64
import hashlib
import time
from collections.abc import Callable

from cryptography.fernet import Fernet, InvalidToken
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from storefront.domain.users.entities import SessionToken
from storefront.domain.users.exceptions import MalformedSessionError


class _SessionPayload(BaseModel):
    user_id: StrictInt = Field(alias="userId")
    username: StrictStr
    role: StrictStr

    model_config = ConfigDict(extra="forbid")


def derive_fernet_key(secret_key: str) -> bytes:
    digest = hashlib.sha256(secret_key.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest)


class FernetSessionTokenCodec:
    """Encrypts and authenticates session tokens with an absolute lifetime.

    The issue time is embedded in the Fernet token itself, so a copied
    cookie stops decoding once ``ttl_seconds`` have elapsed regardless of
    the browser's max-age handling.
    """

    def __init__(
        self,
        secret_key: str,
        *,
        ttl_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._fernet = Fernet(derive_fernet_key(secret_key))
        self._ttl = ttl_seconds
        self._clock = clock

    def encode(self, token: SessionToken) -> str:
        raw = _SessionPayload.model_validate(token.to_payload()).model_dump_json(by_alias=True)
        return self._fernet.encrypt_at_time(raw.encode("utf-8"), int(self._clock())).decode("ascii")

    def decode(self, value: str) -> SessionToken:
        try:
            raw = self._fernet.decrypt_at_time(
                value.encode("ascii"), ttl=self._ttl, current_time=int(self._clock())
            )
        except (InvalidToken, UnicodeEncodeError) as exc:
            raise MalformedSessionError() from exc

        try:
            payload = _SessionPayload.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise MalformedSessionError() from exc

        return SessionToken(user_id=payload.user_id, username=payload.username, role=payload.role)


__all__ = ["FernetSessionTokenCodec", "derive_fernet_key"]
