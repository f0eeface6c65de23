# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from storefront.domain.reviews.entities import Review
from storefront.domain.reviews.repositories import ReviewRepository


class ListReviewsUseCase:
    def __init__(self, *, reviews: ReviewRepository) -> None:
        self._reviews = reviews

    def execute(self, product_id: str | None = None) -> Sequence[Review]:
        return self._reviews.list(product_id or None)
