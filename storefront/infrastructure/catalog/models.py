# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    id: int
    title: str
    description: str = ""
    category: str = ""
    price: float
    discount_percentage: float = Field(0.0, alias="discountPercentage")
    rating: float = 0.0
    stock: int = 0
    brand: str | None = None
    thumbnail: str = ""
    images: list[str] = Field(default_factory=list)

    model_config = ConfigDict(validate_by_name=True, extra="ignore")


class ProductPage(BaseModel):
    products: list[Product] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0

    model_config = ConfigDict(extra="ignore")


__all__ = ["Product", "ProductPage"]
