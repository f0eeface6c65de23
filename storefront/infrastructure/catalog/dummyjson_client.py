# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Read-only client for the DummyJSON product catalog."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from storefront.infrastructure.cache import InMemoryTTLCache
from storefront.shared.logging import logger

from .exceptions import ProductNotFoundError, UpstreamFetchFailedError
from .models import Product, ProductPage


class DummyJsonCatalogClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        listing_ttl: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self._listing_cache: InMemoryTTLCache[tuple[Any, ...], Any] = InMemoryTTLCache(listing_ttl)

    def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.warning(f"catalog.fetch: transport error path={path} err={type(exc).__name__}")
            raise UpstreamFetchFailedError() from exc
        logger.debug(f"catalog.fetch: path={path} status={response.status_code}")
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if response.is_error:
            logger.warning(
                f"catalog.fetch: upstream status={response.status_code} url={response.request.url}"
            )
            raise UpstreamFetchFailedError()
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"catalog.fetch: undecodable body url={response.request.url}")
            raise UpstreamFetchFailedError() from exc

    @staticmethod
    def _page(data: Any) -> ProductPage:
        try:
            return ProductPage.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning(f"catalog.fetch: unexpected listing shape errors={exc.error_count()}")
            raise UpstreamFetchFailedError() from exc

    def _fetch_page(self, path: str, params: dict[str, Any] | None = None) -> ProductPage:
        return self._page(self._json(self._get(path, params)))

    def list_products(self, *, limit: int | None = None, skip: int | None = None) -> ProductPage:
        params = {key: value for key, value in (("limit", limit), ("skip", skip)) if value is not None}
        return self._listing_cache.get_or_set(
            ("products", limit, skip),
            lambda: self._fetch_page("/products", params or None),
        )

    def get_product(self, product_id: str) -> Product:
        response = self._get(f"/products/{quote(str(product_id), safe='')}")
        if response.status_code == 404:
            raise ProductNotFoundError(product_id)
        data = self._json(response)
        try:
            return Product.model_validate(data)
        except PydanticValidationError as exc:
            logger.warning(f"catalog.fetch: unexpected product shape id={product_id}")
            raise UpstreamFetchFailedError() from exc

    def search_products(self, query: str) -> ProductPage:
        query = query.strip()
        if not query:
            return ProductPage()
        return self._fetch_page("/products/search", {"q": query})

    def list_categories(self) -> list[Any]:
        def _load() -> list[Any]:
            data = self._json(self._get("/products/categories"))
            if not isinstance(data, list):
                logger.warning("catalog.fetch: categories payload is not a list")
                raise UpstreamFetchFailedError()
            return data

        return self._listing_cache.get_or_set(("categories",), _load)

    def close(self) -> None:
        self._http.close()


__all__ = ["DummyJsonCatalogClient"]
