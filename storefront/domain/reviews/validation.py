# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from .exceptions import ReviewValidationError

DEFAULT_COMMENT_MAX_LENGTH = 500
RATING_MIN = 1
RATING_MAX = 5


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class ReviewDraft(BaseModel):
    """Submitted review fields after validation and trimming.

    Every field is checked independently so a single submission reports
    all of its problems at once.
    """

    rating: Any = Field(None, validate_default=True)
    product_id: Any = Field(None, alias="productId", validate_default=True)
    user_name: Any = Field(None, alias="userName", validate_default=True)
    comment: Any = Field(None, validate_default=True)

    model_config = ConfigDict(validate_by_name=True, extra="ignore", frozen=True)

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, value: Any) -> int:
        if _is_blank(value):
            raise PydanticCustomError("rating_required", "Rating is required", {})

        if isinstance(value, str):
            text = value.strip()
            # ASCII digits only; short enough that int() cannot hit its digit limit.
            if text.isascii() and text.isdigit() and len(text) <= 3:
                value = int(text)
        elif isinstance(value, float) and value.is_integer():
            value = int(value)

        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or not (
            RATING_MIN <= value <= RATING_MAX
        ):
            raise PydanticCustomError(
                "rating_range",
                "Rating must be an integer between {min} and {max}",
                {"min": RATING_MIN, "max": RATING_MAX},
            )
        return value

    @field_validator("product_id")
    @classmethod
    def validate_product_id(cls, value: Any) -> str:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if _is_blank(value) or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("product_id_required", "Product ID is required", {})
        if not isinstance(value, str):
            raise PydanticCustomError(
                "product_id_type", "Product ID must be a string or integer", {}
            )
        return value.strip()

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, value: Any) -> str:
        if _is_blank(value):
            raise PydanticCustomError("user_name_required", "User name is required", {})
        if not isinstance(value, str):
            raise PydanticCustomError("user_name_type", "User name must be text", {})
        trimmed = value.strip()
        if not trimmed:
            raise PydanticCustomError("user_name_empty", "User name cannot be empty", {})
        return trimmed

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, value: Any, info: ValidationInfo) -> str:
        if _is_blank(value):
            raise PydanticCustomError("comment_required", "Comment is required", {})
        if not isinstance(value, str):
            raise PydanticCustomError("comment_type", "Comment must be text", {})
        trimmed = value.strip()
        if not trimmed:
            raise PydanticCustomError("comment_empty", "Comment cannot be empty", {})

        max_length = (info.context or {}).get("comment_max_length", DEFAULT_COMMENT_MAX_LENGTH)
        if len(trimmed) > max_length:
            raise PydanticCustomError(
                "comment_too_long",
                "Comment cannot exceed {max_length} characters",
                {"max_length": max_length},
            )
        return trimmed


def error_messages(exc: PydanticValidationError) -> list[str]:
    messages: list[str] = []
    for error in exc.errors():
        msg = error.get("msg", "Invalid value")
        if msg not in messages:
            messages.append(msg)
    return messages


def validate_review(
    data: Mapping[str, Any],
    *,
    comment_max_length: int = DEFAULT_COMMENT_MAX_LENGTH,
) -> ReviewDraft:
    """Validate a raw submission, raising ReviewValidationError with every violation."""

    try:
        return ReviewDraft.model_validate(
            dict(data), context={"comment_max_length": comment_max_length}
        )
    except PydanticValidationError as exc:
        raise ReviewValidationError(error_messages(exc)) from exc


__all__ = ["ReviewDraft", "error_messages", "validate_review"]
