# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .reviews.entities import Review
from .reviews.exceptions import ReviewValidationError
from .users.entities import Credential, Role, SessionToken
from .users.exceptions import InvalidCredentialsError, MalformedSessionError
from .users.gate import ALLOW, Allow, GateDecision, RedirectTo, RouteGate

__all__ = [
    "ALLOW",
    "Allow",
    "Credential",
    "GateDecision",
    "InvalidCredentialsError",
    "MalformedSessionError",
    "RedirectTo",
    "Review",
    "ReviewValidationError",
    "Role",
    "RouteGate",
    "SessionToken",
]
