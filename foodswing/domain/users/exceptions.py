# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from foodswing.shared.errors.base import DomainError


class DuplicateEmailError(DomainError):
    code = "duplicate_email"
    message = "Email already registered"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class MissingTokenError(DomainError):
    code = "missing_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Access token required"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.FORBIDDEN
    message = "Invalid or expired token"
