# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authgate.application.use_cases.users.login_user import LoginUserUseCase
from authgate.application.use_cases.users.register_user import \
    RegisterUserUseCase
from authgate.interfaces.http.dto.auth import (LoginRequestDTO,
                                               LoginSuccessDTO,
                                               RegisterRequestDTO,
                                               RegisterSuccessDTO)
from authgate.shared.config.settings import SecurityConfig
from authgate.shared.errors import InfrastructureError
from authgate.shared.errors.validation import raise_validation_error
from authgate.shared.logging import logger


def _request_payload() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            self._register_use_case.execute(
                dto.username, dto.email, dto.password, dto.confirm_password
            )
        except InfrastructureError as exc:
            logger.error(f"auth.register: failed code={exc.code}")
            raise InfrastructureError(exc.code, message="Registration failed") from exc

        return jsonify(RegisterSuccessDTO().model_dump()), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except InfrastructureError as exc:
            logger.error(f"auth.login: failed code={exc.code}")
            raise InfrastructureError(exc.code, message="Login failed") from exc

        payload = LoginSuccessDTO(
            username=result.user.username, email=result.user.email
        ).model_dump()
        response = jsonify(payload)

        # No max_age: the registry never expires entries, so neither does the cookie.
        response.set_cookie(
            self._security.session_cookie_name,
            result.session.session_id,
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure,
        )
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
