# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from foodswing.application.use_cases.users.login_user import LoginUserUseCase
from foodswing.application.use_cases.users.register_user import \
    RegisterUserUseCase
from foodswing.application.use_cases.users.verify_session import \
    VerifySessionUseCase
from foodswing.domain.users.entities import User
from foodswing.domain.users.exceptions import (DuplicateEmailError,
                                               InvalidCredentialsError)
from foodswing.infrastructure.audit import AuditAction, audit_log
from foodswing.infrastructure.auth.session_middleware import (current_user,
                                                              require_auth)
from foodswing.interfaces.http.dto.auth import (AuthSuccessDTO,
                                                LoginRequestDTO,
                                                SignupRequestDTO, UserDTO,
                                                VerifySuccessDTO)
from foodswing.interfaces.http.utils import get_client_ip, json_body
from foodswing.shared.errors.validation import raise_validation_error
from foodswing.shared.logging import logger


def _auth_payload(user: User, token: str, message: str) -> dict:
    dto = AuthSuccessDTO(
        message=message,
        token=token,
        user=UserDTO(id=user.id, name=user.name, email=user.email),
    )
    return dto.to_json()


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        verify_session: VerifySessionUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._verify_session = verify_session

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Please provide all required fields")

        try:
            user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)
        except DuplicateEmailError:
            audit_log(
                AuditAction.SIGNUP_FAILED,
                ip_address=get_client_ip(),
                details={"reason": "duplicate_email"},
                success=False,
            )
            raise

        audit_log(AuditAction.SIGNUP, user_id=user.id, ip_address=get_client_ip())
        logger.info(f"auth.signup: ok user_id={user.id}")
        payload = _auth_payload(user, token, "Account created successfully! 🎉")
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Please provide email and password")

        ip_address = get_client_ip()
        try:
            user, token = self._login_use_case.execute(dto.email, dto.password)
        except InvalidCredentialsError:
            audit_log(AuditAction.LOGIN_FAILED, ip_address=ip_address, success=False)
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=user.id, ip_address=ip_address)
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(_auth_payload(user, token, "Welcome back! 🎉")), HTTPStatus.OK

    def verify(self) -> tuple[Response, int]:
        claims = current_user()
        return jsonify(VerifySuccessDTO(user=claims.to_dict()).to_json()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        authed = require_auth(self._verify_session)
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/verify", view_func=authed(self.verify), methods=["GET"])
        return bp
