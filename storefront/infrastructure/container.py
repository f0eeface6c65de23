# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

import httpx

from storefront.application.services.session_gate import SessionGate
from storefront.application.use_cases.admin.get_dashboard_stats import \
    GetDashboardStatsUseCase
from storefront.application.use_cases.catalog.products import (
    GetProductUseCase, ListCategoriesUseCase, ListProductsUseCase,
    SearchProductsUseCase)
from storefront.application.use_cases.reviews.list_reviews import \
    ListReviewsUseCase
from storefront.application.use_cases.reviews.submit_review import \
    SubmitReviewUseCase
from storefront.domain.users.gate import RouteGate
from storefront.infrastructure.catalog.dummyjson_client import \
    DummyJsonCatalogClient
from storefront.infrastructure.repositories.in_memory_review_repository import \
    InMemoryReviewRepository
from storefront.infrastructure.repositories.static_credential_store import \
    StaticCredentialStore
from storefront.infrastructure.security.token_codec import \
    FernetSessionTokenCodec
from storefront.interfaces.http.controllers.admin_controller import \
    AdminController
from storefront.interfaces.http.controllers.auth_controller import \
    AuthController
from storefront.interfaces.http.controllers.catalog_controller import \
    CatalogController
from storefront.interfaces.http.controllers.misc_controller import \
    MiscController
from storefront.interfaces.http.controllers.reviews_controller import \
    ReviewsController
from storefront.shared.config import AppConfig


class Container:
    """Owns every process-wide object of one application instance."""

    def __init__(
        self,
        config: AppConfig,
        *,
        catalog_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self._catalog_transport = catalog_transport

    # Session gate

    @cached_property
    def credential_store(self) -> StaticCredentialStore:
        return StaticCredentialStore(
            username=self.config.admin.username,
            password=self.config.admin.password,
        )

    @cached_property
    def session_token_codec(self) -> FernetSessionTokenCodec:
        return FernetSessionTokenCodec(
            self.config.secret_key,
            ttl_seconds=self.config.security.session_lifetime,
        )

    @cached_property
    def route_gate(self) -> RouteGate:
        security = self.config.security
        return RouteGate(
            protected_prefixes=security.protected_prefixes,
            auth_routes=security.auth_routes,
            login_path=security.login_path,
            default_redirect=security.default_redirect,
        )

    @cached_property
    def session_gate(self) -> SessionGate:
        return SessionGate(
            credentials=self.credential_store,
            codec=self.session_token_codec,
            routes=self.route_gate,
        )

    # Reviews

    @cached_property
    def review_repository(self) -> InMemoryReviewRepository:
        return InMemoryReviewRepository()

    @cached_property
    def submit_review_use_case(self) -> SubmitReviewUseCase:
        return SubmitReviewUseCase(
            reviews=self.review_repository,
            comment_max_length=self.config.reviews.comment_max_length,
        )

    @cached_property
    def list_reviews_use_case(self) -> ListReviewsUseCase:
        return ListReviewsUseCase(reviews=self.review_repository)

    # Catalog

    @cached_property
    def catalog_client(self) -> DummyJsonCatalogClient:
        catalog = self.config.catalog
        return DummyJsonCatalogClient(
            base_url=catalog.base_url,
            timeout=catalog.timeout,
            listing_ttl=catalog.products_ttl,
            transport=self._catalog_transport,
        )

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(catalog=self.catalog_client)

    @cached_property
    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(catalog=self.catalog_client)

    @cached_property
    def search_products_use_case(self) -> SearchProductsUseCase:
        return SearchProductsUseCase(catalog=self.catalog_client)

    @cached_property
    def list_categories_use_case(self) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(catalog=self.catalog_client)

    # Admin

    @cached_property
    def get_dashboard_stats_use_case(self) -> GetDashboardStatsUseCase:
        return GetDashboardStatsUseCase(
            catalog=self.catalog_client,
            reviews=self.review_repository,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(gate=self.session_gate, config=self.config)

    @cached_property
    def reviews_controller(self) -> ReviewsController:
        return ReviewsController(
            submit_review=self.submit_review_use_case,
            list_reviews=self.list_reviews_use_case,
        )

    @cached_property
    def catalog_controller(self) -> CatalogController:
        return CatalogController(
            list_products=self.list_products_use_case,
            get_product=self.get_product_use_case,
            search_products=self.search_products_use_case,
            list_categories=self.list_categories_use_case,
        )

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(get_dashboard_stats=self.get_dashboard_stats_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(reviews=self.review_repository)

    def close(self) -> None:
        if "catalog_client" in self.__dict__:
            self.catalog_client.close()
