from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewDTO(BaseModel):
    id: str
    product_id: str = Field(serialization_alias="productId")
    user_name: str = Field(serialization_alias="userName")
    comment: str
    rating: int
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


class ReviewCreatedDTO(BaseModel):
    success: bool = True
    message: str = "Review submitted successfully"
    review: ReviewDTO


class ReviewListDTO(BaseModel):
    success: bool = True
    reviews: list[ReviewDTO]
    total: int
