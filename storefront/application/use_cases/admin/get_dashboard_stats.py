# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.interfaces import CatalogPort
from storefront.domain.reviews.repositories import ReviewRepository


@dataclass(slots=True, frozen=True)
class DashboardStats:
    total_products: int
    total_reviews: int
    average_rating: float


class GetDashboardStatsUseCase:
    def __init__(self, *, catalog: CatalogPort, reviews: ReviewRepository) -> None:
        self._catalog = catalog
        self._reviews = reviews

    def execute(self) -> DashboardStats:
        page = self._catalog.list_products()
        ratings = [product.rating for product in page.products]
        average = round(sum(ratings) / len(ratings), 2) if ratings else 0.0
        return DashboardStats(
            total_products=page.total,
            total_reviews=self._reviews.count(),
            average_rating=average,
        )


__all__ = ["DashboardStats", "GetDashboardStatsUseCase"]
