# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import (
    AdminConfig,
    AppConfig,
    CatalogConfig,
    ReviewsConfig,
    SecurityConfig,
    load_config,
    production_issues,
)

__all__ = [
    "AdminConfig",
    "AppConfig",
    "CatalogConfig",
    "ReviewsConfig",
    "SecurityConfig",
    "load_config",
    "production_issues",
]
