# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from storefront.shared.errors.base import DomainError


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class MalformedSessionError(DomainError):
    """Raised by token codecs; callers treat it as an absent session."""

    code = "malformed_session"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid session"
