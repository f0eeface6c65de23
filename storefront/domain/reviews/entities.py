# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Review:
    """A stored product review. Never mutated after creation."""

    id: str
    product_id: str
    user_name: str
    comment: str
    rating: int
    created_at: datetime
