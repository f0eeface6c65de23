from __future__ import annotations

import pytest

from storefront.shared.config import (AdminConfig, AppConfig, CatalogConfig,
                                     SecurityConfig, production_issues)


def test_defaults(monkeypatch) -> None:
    for name in (
        "APP_ENV",
        "SECRET_KEY",
        "ADMIN_USERNAME",
        "ADMIN_PASSWORD",
        "CATALOG_BASE_URL",
        "COOKIE_SECURE",
        "PROTECTED_PREFIXES",
    ):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.admin.username == "admin"
    assert config.admin.password == "admin123"
    assert config.catalog.base_url == "https://dummyjson.com"
    assert config.catalog.products_ttl == 300
    assert config.reviews.comment_max_length == 500
    assert config.security.auth_cookie_name == "auth-token"
    assert config.security.session_lifetime == 86400
    assert config.security.protected_prefixes == ["/admin", "/api/admin"]
    assert config.cookie_secure is False


def test_env_lists_are_comma_separated(monkeypatch) -> None:
    monkeypatch.setenv("PROTECTED_PREFIXES", "/admin, /internal")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://shop.example,https://admin.example")

    security = SecurityConfig()

    assert security.protected_prefixes == ["/admin", "/internal"]
    assert security.allowed_origins == ["https://shop.example", "https://admin.example"]


def test_catalog_base_url_trailing_slash(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_BASE_URL", "https://dummyjson.test/")

    assert CatalogConfig().base_url == "https://dummyjson.test"


def test_cookie_secure_follows_environment() -> None:
    production = AppConfig(app_env="production", secret_key="a-long-random-secret")
    explicit = AppConfig(
        app_env="production",
        secret_key="a-long-random-secret",
        security=SecurityConfig(cookie_secure=False),
    )

    assert production.cookie_secure is True
    assert explicit.cookie_secure is False


def test_production_refuses_insecure_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", secret_key="dev")


def test_production_issues_lists_weak_settings() -> None:
    config = AppConfig(app_env="production", secret_key="a-long-random-secret")

    issues = production_issues(config)

    assert any("ADMIN_PASSWORD" in issue for issue in issues)
    assert any("ALLOWED_ORIGINS" in issue for issue in issues)


def test_production_with_hardened_settings_has_no_issues() -> None:
    config = AppConfig(
        app_env="production",
        secret_key="a-long-random-secret",
        admin=AdminConfig(password="s3cure-pass"),
        security=SecurityConfig(
            allowed_origins=["https://shop.example"], enable_hsts=True
        ),
    )

    assert production_issues(config) == []
