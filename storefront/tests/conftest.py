from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from flask import Flask

from storefront.app import create_app
from storefront.infrastructure.container import Container
from storefront.shared.config import AppConfig, CatalogConfig, SecurityConfig

PRODUCTS = [
    {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "A popular mascara.",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 7.17,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/1/thumbnail.png",
        "images": ["https://cdn.dummyjson.com/products/images/beauty/1/1.png"],
    },
    {
        "id": 2,
        "title": "Eyeshadow Palette with Mirror",
        "description": "Versatile eyeshadow shades.",
        "category": "beauty",
        "price": 19.99,
        "discountPercentage": 5.5,
        "rating": 3.0,
        "stock": 44,
        "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/2/thumbnail.png",
        "images": [],
    },
]


class FakeCatalog:
    """httpx handler imitating the DummyJSON product endpoints."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.fail_with: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)

        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "upstream down"})

        if path == "/products":
            return httpx.Response(
                200, json={"products": PRODUCTS, "total": 194, "skip": 0, "limit": 30}
            )
        if path == "/products/search":
            query = request.url.params.get("q", "").lower()
            found = [p for p in PRODUCTS if query in p["title"].lower()]
            return httpx.Response(
                200, json={"products": found, "total": len(found), "skip": 0, "limit": len(found)}
            )
        if path == "/products/categories":
            return httpx.Response(
                200,
                json=[{"slug": "beauty", "name": "Beauty", "url": "https://dummyjson.com/products/category/beauty"}],
            )
        if path.startswith("/products/"):
            product_id = path.rsplit("/", 1)[-1]
            for product in PRODUCTS:
                if str(product["id"]) == product_id:
                    return httpx.Response(200, json=product)
            return httpx.Response(404, json={"message": f"Product with id '{product_id}' not found"})

        return httpx.Response(404, json={"message": "not found"})


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key="test-secret-key",
        catalog=CatalogConfig(base_url="https://dummyjson.test"),
        security=SecurityConfig(enable_rate_limit=False),
    )


@pytest.fixture()
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture()
def container(config: AppConfig, fake_catalog: FakeCatalog) -> Iterator[Container]:
    built = Container(config, catalog_transport=httpx.MockTransport(fake_catalog))
    yield built
    built.close()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    def _login(username: str = "admin", password: str = "admin123"):
        return client.post("/api/auth/login", json={"username": username, "password": password})

    return _login
