# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "")

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


class AdminConfig(BaseSettings):
    username: str = Field("admin", alias="ADMIN_USERNAME")
    password: str = Field("admin123", alias="ADMIN_PASSWORD")

    model_config = _SECTION_CONFIG


class CatalogConfig(BaseSettings):
    base_url: str = Field("https://dummyjson.com", alias="CATALOG_BASE_URL")
    timeout: float = Field(10.0, ge=0.1, alias="CATALOG_TIMEOUT")
    products_ttl: int = Field(300, ge=1, alias="CATALOG_PRODUCTS_TTL")

    model_config = _SECTION_CONFIG

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")


class ReviewsConfig(BaseSettings):
    comment_max_length: int = Field(500, ge=1, alias="REVIEW_COMMENT_MAX_LENGTH")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    # Session cookie
    auth_cookie_name: str = Field("auth-token", alias="AUTH_COOKIE_NAME")
    cookie_secure: bool | None = Field(None, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")
    session_lifetime: int = Field(60 * 60 * 24, ge=1, alias="SESSION_LIFETIME")

    # Route gate
    protected_prefixes: Annotated[list[str], NoDecode] = Field(
        ["/admin", "/api/admin"], alias="PROTECTED_PREFIXES"
    )
    auth_routes: Annotated[list[str], NoDecode] = Field(["/login"], alias="AUTH_ROUTES")
    login_path: str = Field("/login", alias="LOGIN_PATH")
    default_redirect: str = Field("/admin", alias="DEFAULT_REDIRECT")

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, ge=0.1, alias="RL_WINDOW")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", "protected_prefixes", "auth_routes", mode="before")
    @classmethod
    def _parse_list(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("cookie_secure", mode="before")
    @classmethod
    def _parse_optional_bool(cls, value: str | bool | None) -> bool | None:
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def production_issues(config: "AppConfig") -> list[str]:
    """Settings that are tolerated in production but should be fixed."""

    issues = []
    if config.admin.password == "admin123":
        issues.append("ADMIN_PASSWORD is the built-in default")
    if not config.cookie_secure:
        issues.append("session cookie is sent without the Secure flag (set COOKIE_SECURE)")
    if "*" in config.security.allowed_origins:
        issues.append("CORS allows any origin (set ALLOWED_ORIGINS)")
    if not config.security.enable_hsts:
        issues.append("HSTS is disabled (set ENABLE_HSTS)")
    return issues


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    admin: AdminConfig = Field(default_factory=AdminConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    reviews: ReviewsConfig = Field(default_factory=ReviewsConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _check_production(self) -> "AppConfig":
        if not self.is_production():
            return self

        # The secret key is the only thing protecting the admin cookie.
        if self.secret_key in _INSECURE_SECRETS:
            print(
                "FATAL: SECRET_KEY is unset or a development value while APP_ENV=production.\n"
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"",
                file=sys.stderr,
            )
            sys.exit(1)

        for issue in production_issues(self):
            print(f"WARNING (production): {issue}", file=sys.stderr)
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    @property
    def cookie_secure(self) -> bool:
        """Explicit COOKIE_SECURE wins, otherwise secure cookies only in production."""
        if self.security.cookie_secure is not None:
            return self.security.cookie_secure
        return self.is_production()


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AdminConfig",
    "AppConfig",
    "CatalogConfig",
    "ReviewsConfig",
    "SecurityConfig",
    "load_config",
    "production_issues",
]
