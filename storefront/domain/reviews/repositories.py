# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Review


class ReviewRepository(Protocol):
    def add(self, review: Review) -> Review: ...
    def list(self, product_id: str | None = None) -> Sequence[Review]: ...
    def count(self) -> int: ...
