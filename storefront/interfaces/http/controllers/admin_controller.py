# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from storefront.application.use_cases.admin.get_dashboard_stats import \
    GetDashboardStatsUseCase
from storefront.infrastructure.session_middleware import (
    AdminAuthenticationError, current_session, require_admin)
from storefront.interfaces.http.dto.admin import (AdminDashboardDTO,
                                                  DashboardStatsDTO,
                                                  DashboardStatsResponseDTO)
from storefront.interfaces.http.dto.auth import UserDTO
from storefront.shared.logging import logger


class AdminController:
    def __init__(self, *, get_dashboard_stats: GetDashboardStatsUseCase) -> None:
        self._get_dashboard_stats = get_dashboard_stats

    @require_admin
    def dashboard(self) -> tuple[Response, int]:
        session = current_session()
        if session is None:
            raise AdminAuthenticationError()
        stats = DashboardStatsDTO.model_validate(self._get_dashboard_stats.execute())
        dto = AdminDashboardDTO(user=UserDTO.from_session(session), stats=stats)
        logger.info(f"admin.dashboard: served user={session.user_id}")
        return jsonify(dto.model_dump(by_alias=True)), HTTPStatus.OK

    @require_admin
    def stats(self) -> tuple[Response, int]:
        stats = DashboardStatsDTO.model_validate(self._get_dashboard_stats.execute())
        dto = DashboardStatsResponseDTO(stats=stats)
        logger.info(
            f"admin.stats: products={stats.total_products} reviews={stats.total_reviews}"
        )
        return jsonify(dto.model_dump(by_alias=True)), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__)
        bp.add_url_rule("/admin", view_func=self.dashboard, methods=["GET"])
        bp.add_url_rule("/api/admin/stats", view_func=self.stats, methods=["GET"])
        return bp
