from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask, g

from storefront.application.use_cases.admin.get_dashboard_stats import (
    DashboardStats, GetDashboardStatsUseCase)
from storefront.application.use_cases.reviews.list_reviews import \
    ListReviewsUseCase
from storefront.application.use_cases.reviews.submit_review import \
    SubmitReviewUseCase
from storefront.domain.users.entities import SessionToken
from storefront.infrastructure.session_middleware import AdminAuthenticationError
from storefront.interfaces.http.controllers.admin_controller import \
    AdminController
from storefront.interfaces.http.controllers.reviews_controller import \
    ReviewsController
from storefront.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _with_session(app: Flask, session: SessionToken | None) -> None:
    @app.before_request
    def _inject():
        g.auth_session = session


def test_admin_stats_renders_use_case_result(flask_app: Flask) -> None:
    stats_use_case = MagicMock()
    stats_use_case.execute.return_value = DashboardStats(
        total_products=10, total_reviews=2, average_rating=4.5
    )
    controller = AdminController(
        get_dashboard_stats=cast(GetDashboardStatsUseCase, stats_use_case)
    )
    _with_session(flask_app, SessionToken(user_id=1, username="admin", role="admin"))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/admin/stats")

    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "stats": {"totalProducts": 10, "totalReviews": 2, "averageRating": 4.5},
    }
    stats_use_case.execute.assert_called_once_with()


def test_admin_stats_without_session_is_unauthorized(flask_app: Flask) -> None:
    controller = AdminController(get_dashboard_stats=MagicMock())
    _with_session(flask_app, None)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/admin/stats")

    assert response.status_code == 401
    assert response.get_json() == {"success": False, "error": "Authentication required"}


def test_admin_stats_for_non_admin_is_forbidden(flask_app: Flask) -> None:
    controller = AdminController(get_dashboard_stats=MagicMock())
    _with_session(flask_app, SessionToken(user_id=2, username="bob", role="viewer"))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/admin")

    assert response.status_code == 403


def test_unexpected_error_is_internal_server_error(flask_app: Flask) -> None:
    submit = MagicMock()
    submit.execute.side_effect = RuntimeError("disk on fire")
    controller = ReviewsController(
        submit_review=cast(SubmitReviewUseCase, submit),
        list_reviews=cast(ListReviewsUseCase, MagicMock()),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/reviews",
            json={"productId": "1", "userName": "a", "comment": "b", "rating": 5},
        )

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "error": "Internal server error"}
    assert "disk on fire" not in response.get_data(as_text=True)


def test_dashboard_body_refuses_missing_session(flask_app: Flask) -> None:
    controller = AdminController(get_dashboard_stats=MagicMock())
    unguarded = AdminController.dashboard.__wrapped__

    with flask_app.test_request_context("/admin"):
        with pytest.raises(AdminAuthenticationError):
            unguarded(controller)
