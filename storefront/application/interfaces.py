# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, Protocol

from storefront.infrastructure.catalog.models import Product, ProductPage


class CatalogPort(Protocol):
    def list_products(self, *, limit: int | None = None, skip: int | None = None) -> ProductPage: ...

    def get_product(self, product_id: str) -> Product: ...

    def search_products(self, query: str) -> ProductPage: ...

    def list_categories(self) -> list[Any]: ...
