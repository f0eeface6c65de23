# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog read use-cases. Listings may be served from cache, search never is."""

from __future__ import annotations

from typing import Any

from storefront.application.interfaces import CatalogPort
from storefront.infrastructure.catalog.models import Product, ProductPage


class ListProductsUseCase:
    def __init__(self, *, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def execute(self, *, limit: int | None = None, skip: int | None = None) -> ProductPage:
        return self._catalog.list_products(limit=limit, skip=skip)


class GetProductUseCase:
    def __init__(self, *, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def execute(self, product_id: str) -> Product:
        return self._catalog.get_product(product_id)


class SearchProductsUseCase:
    def __init__(self, *, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def execute(self, query: str) -> ProductPage:
        return self._catalog.search_products(query)


class ListCategoriesUseCase:
    def __init__(self, *, catalog: CatalogPort) -> None:
        self._catalog = catalog

    def execute(self) -> list[Any]:
        return self._catalog.list_categories()


__all__ = [
    "GetProductUseCase",
    "ListCategoriesUseCase",
    "ListProductsUseCase",
    "SearchProductsUseCase",
]
