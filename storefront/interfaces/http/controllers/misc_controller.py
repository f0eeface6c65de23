# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from storefront.domain.reviews.repositories import ReviewRepository


class MiscController:
    """Liveness probe. It never calls the catalog upstream."""

    def __init__(
        self,
        *,
        reviews: ReviewRepository,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._reviews = reviews
        self._clock = clock
        self._started = clock()

    def health(self) -> tuple[Response, int]:
        return (
            jsonify(
                {
                    "ok": True,
                    "uptimeSeconds": round(self._clock() - self._started, 3),
                    "reviews": self._reviews.count(),
                }
            ),
            HTTPStatus.OK,
        )

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp
