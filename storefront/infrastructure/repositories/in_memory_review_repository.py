# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock

from storefront.domain.reviews.entities import Review
from storefront.shared.logging import logger


class InMemoryReviewRepository:
    """Append-only review store living for the lifetime of the process.

    Nothing is persisted and the store is not capped.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._reviews: list[Review] = []

    def add(self, review: Review) -> Review:
        with self._lock:
            self._reviews.append(review)
            size = len(self._reviews)
        logger.debug(f"reviews.store: appended id={review.id} size={size}")
        return review

    def list(self, product_id: str | None = None) -> list[Review]:
        with self._lock:
            snapshot = list(self._reviews)

        if product_id is not None:
            snapshot = [review for review in snapshot if review.product_id == product_id]

        # Newest submission first among equal timestamps.
        snapshot.reverse()
        return sorted(snapshot, key=lambda review: review.created_at, reverse=True)

    def count(self) -> int:
        with self._lock:
            return len(self._reviews)


__all__ = ["InMemoryReviewRepository"]
