# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, redirect, request
from pydantic import ValidationError

from storefront.application.services.session_gate import SessionGate
from storefront.domain.users.exceptions import InvalidCredentialsError
from storefront.infrastructure.session_middleware import current_session
from storefront.interfaces.http.dto.auth import (LoginPageDTO, LoginRequestDTO,
                                                 LoginSuccessDTO,
                                                 SessionCheckDTO, UserDTO)
from storefront.interfaces.http.session_cookie import (clear_session_cookie,
                                                       set_session_cookie)
from storefront.shared.config import AppConfig
from storefront.shared.errors.base import LoginFailedError
from storefront.shared.logging import logger
from storefront.shared.middleware.rate_limit import rate_limit
from storefront.shared.middleware.request_logger import client_ip


class AuthController:
    def __init__(self, *, gate: SessionGate, config: AppConfig) -> None:
        self._gate = gate
        self._config = config

    def login(self) -> tuple[Response, int]:
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            logger.warning(f"auth.login: unreadable body from {client_ip()}")
            raise LoginFailedError()

        try:
            dto = LoginRequestDTO.model_validate(body)
        except ValidationError as exc:
            logger.warning(f"auth.login: malformed fields from {client_ip()}")
            raise LoginFailedError() from exc

        try:
            grant = self._gate.authenticate(dto.username or "", dto.password or "")
        except InvalidCredentialsError:
            logger.warning(f"auth.login: invalid credentials from {client_ip()}")
            raise

        payload = LoginSuccessDTO(user=UserDTO.from_session(grant.session)).model_dump()
        response = jsonify(payload)
        set_session_cookie(response, grant.token, self._config)
        logger.info(f"auth.login: ok username={grant.credential.username}")
        return response, HTTPStatus.OK

    def logout(self) -> Response:
        response = redirect(self._gate.login_path, code=HTTPStatus.SEE_OTHER)
        clear_session_cookie(response, self._config)
        logger.info("auth.logout: ok")
        return response

    def check(self) -> tuple[Response, int]:
        session = current_session()
        dto = SessionCheckDTO(
            authenticated=session is not None,
            user=UserDTO.from_session(session) if session else None,
        )
        return jsonify(dto.model_dump()), HTTPStatus.OK

    def login_page(self) -> tuple[Response, int]:
        target = self._gate.post_login_target(request.args.get("redirect"))
        return jsonify(LoginPageDTO(redirect=target).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        security = self._config.security
        limited_login = rate_limit(
            security.rate_limit_requests,
            security.rate_limit_window,
            enabled=security.enable_rate_limit,
        )(self.login)

        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/api/auth/login", view_func=limited_login, methods=["POST"])
        bp.add_url_rule("/api/auth/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/api/auth/check", view_func=self.check, methods=["GET"])
        bp.add_url_rule(self._gate.login_path, view_func=self.login_page, methods=["GET"])
        return bp
