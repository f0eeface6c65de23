# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from storefront.application.use_cases.reviews.list_reviews import \
    ListReviewsUseCase
from storefront.application.use_cases.reviews.submit_review import \
    SubmitReviewUseCase
from storefront.domain.reviews.exceptions import ReviewValidationError
from storefront.interfaces.http.dto.reviews import (ReviewCreatedDTO,
                                                    ReviewDTO, ReviewListDTO)
from storefront.shared.errors.base import MalformedRequestBodyError
from storefront.shared.logging import logger


class ReviewsController:
    def __init__(
        self,
        *,
        submit_review: SubmitReviewUseCase,
        list_reviews: ListReviewsUseCase,
    ) -> None:
        self._submit_review = submit_review
        self._list_reviews = list_reviews

    def submit(self) -> tuple[Response, int]:
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            logger.warning("reviews.submit: request body is not a JSON object")
            raise MalformedRequestBodyError()

        try:
            review = self._submit_review.execute(body)
        except ReviewValidationError as exc:
            logger.info(f"reviews.submit: rejected violations={len(exc.details or ())}")
            raise

        dto = ReviewCreatedDTO(review=ReviewDTO.model_validate(review))
        logger.info(f"reviews.submit: ok id={review.id} product_id={review.product_id}")
        return jsonify(dto.model_dump(mode="json", by_alias=True)), HTTPStatus.CREATED

    def list(self) -> tuple[Response, int]:
        product_id = request.args.get("productId") or None
        reviews = self._list_reviews.execute(product_id)
        dto = ReviewListDTO(
            reviews=[ReviewDTO.model_validate(review) for review in reviews],
            total=len(reviews),
        )
        return jsonify(dto.model_dump(mode="json", by_alias=True)), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("reviews", __name__, url_prefix="/api/reviews")
        bp.add_url_rule("", view_func=self.submit, methods=["POST"])
        bp.add_url_rule("", view_func=self.list, methods=["GET"])
        return bp
