# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from storefront.domain.reviews.entities import Review
from storefront.domain.reviews.repositories import ReviewRepository
from storefront.domain.reviews.validation import (
    DEFAULT_COMMENT_MAX_LENGTH,
    validate_review,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_review_id() -> str:
    return uuid.uuid4().hex


class SubmitReviewUseCase:
    def __init__(
        self,
        *,
        reviews: ReviewRepository,
        comment_max_length: int = DEFAULT_COMMENT_MAX_LENGTH,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_review_id,
    ) -> None:
        self._reviews = reviews
        self._comment_max_length = comment_max_length
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, data: Mapping[str, Any]) -> Review:
        draft = validate_review(data, comment_max_length=self._comment_max_length)
        review = Review(
            id=self._id_factory(),
            product_id=draft.product_id,
            user_name=draft.user_name,
            comment=draft.comment,
            rating=draft.rating,
            created_at=self._clock(),
        )
        return self._reviews.add(review)
