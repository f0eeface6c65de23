# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from storefront.application.use_cases.catalog.products import (
    GetProductUseCase, ListCategoriesUseCase, ListProductsUseCase,
    SearchProductsUseCase)
from storefront.infrastructure.catalog.models import ProductPage
from storefront.shared.logging import logger


def _page_payload(page: ProductPage) -> dict:
    return {"success": True, **page.model_dump(mode="json", by_alias=True)}


class CatalogController:
    def __init__(
        self,
        *,
        list_products: ListProductsUseCase,
        get_product: GetProductUseCase,
        search_products: SearchProductsUseCase,
        list_categories: ListCategoriesUseCase,
    ) -> None:
        self._list_products = list_products
        self._get_product = get_product
        self._search_products = search_products
        self._list_categories = list_categories

    def products(self) -> tuple[Response, int]:
        limit = request.args.get("limit", type=int)
        skip = request.args.get("skip", type=int)
        page = self._list_products.execute(limit=limit, skip=skip)
        return jsonify(_page_payload(page)), HTTPStatus.OK

    def product(self, product_id: str) -> tuple[Response, int]:
        product = self._get_product.execute(product_id)
        payload = {"success": True, "product": product.model_dump(mode="json", by_alias=True)}
        return jsonify(payload), HTTPStatus.OK

    def search(self) -> tuple[Response, int]:
        query = request.args.get("q", "")
        page = self._search_products.execute(query)
        logger.info(f"catalog.search: q={query!r} results={len(page.products)}")
        return jsonify({"query": query.strip(), **_page_payload(page)}), HTTPStatus.OK

    def categories(self) -> tuple[Response, int]:
        return jsonify({"success": True, "categories": self._list_categories.execute()}), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("catalog", __name__, url_prefix="/api/products")
        bp.add_url_rule("", view_func=self.products, methods=["GET"])
        bp.add_url_rule("/search", view_func=self.search, methods=["GET"])
        bp.add_url_rule("/categories", view_func=self.categories, methods=["GET"])
        bp.add_url_rule("/<product_id>", view_func=self.product, methods=["GET"])
        return bp
