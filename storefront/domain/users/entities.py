# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Role(str, Enum):
    ADMIN = "admin"


@dataclass(slots=True, frozen=True)
class Credential:
    id: int
    username: str
    password: str
    role: Role = Role.ADMIN


@dataclass(slots=True, frozen=True)
class SessionToken:
    """Identity carried inside the session cookie."""

    user_id: int
    username: str
    role: str

    @classmethod
    def for_credential(cls, credential: Credential) -> SessionToken:
        return cls(
            user_id=credential.id,
            username=credential.username,
            role=credential.role.value,
        )

    def to_payload(self) -> dict[str, Any]:
        return {"userId": self.user_id, "username": self.username, "role": self.role}
