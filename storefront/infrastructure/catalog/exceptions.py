# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from storefront.shared.errors.base import AppError, InfrastructureError


class ProductNotFoundError(AppError):
    def __init__(self, product_id: str) -> None:
        super().__init__(
            code="product_not_found",
            status=HTTPStatus.NOT_FOUND,
            message="Product not found",
        )
        self.product_id = product_id


class UpstreamFetchFailedError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "upstream_fetch_failed",
            status=HTTPStatus.BAD_GATEWAY,
            message="Failed to fetch products",
        )


__all__ = ["ProductNotFoundError", "UpstreamFetchFailedError"]
