# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from foodswing.domain.users.entities import SessionClaims
from foodswing.domain.users.exceptions import InvalidTokenError, MissingTokenError
from foodswing.domain.users.repositories import TokenIssuer

_BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from a ``Bearer <token>`` header value.

    The scheme is matched case-insensitively.
    """

    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != _BEARER_SCHEME:
        raise MissingTokenError()
    token = token.strip()
    if not token or " " in token:
        raise MissingTokenError()
    return token


class VerifySessionUseCase:
    """Turns raw ``Authorization`` header metadata into a verified identity."""

    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def execute(self, authorization: str | None) -> SessionClaims:
        token = extract_bearer_token(authorization)
        return self._tokens.verify(token)


__all__ = [
    "VerifySessionUseCase",
    "extract_bearer_token",
]
