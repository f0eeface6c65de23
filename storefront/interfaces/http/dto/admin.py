# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .auth import UserDTO


class DashboardStatsDTO(BaseModel):
    total_products: int = Field(serialization_alias="totalProducts")
    total_reviews: int = Field(serialization_alias="totalReviews")
    average_rating: float = Field(serialization_alias="averageRating")

    model_config = ConfigDict(from_attributes=True)


class DashboardStatsResponseDTO(BaseModel):
    success: bool = True
    stats: DashboardStatsDTO


class AdminDashboardDTO(BaseModel):
    success: bool = True
    user: UserDTO
    stats: DashboardStatsDTO
