# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from storefront.shared.errors.base import DomainError


class ReviewValidationError(DomainError):
    code = "validation_failed"
    message = "Validation failed"

    def __init__(self, details: Sequence[str]) -> None:
        super().__init__(details=list(details))
