# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens signed with the server secret."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from foodswing.domain.users.entities import SessionClaims, User
from foodswing.domain.users.exceptions import InvalidTokenError
from foodswing.domain.users.repositories import TokenIssuer
from foodswing.shared.logging import logger

DEFAULT_TOKEN_TTL = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenIssuer):
    """Issues and verifies HS256 JWTs carrying ``id``, ``email`` and ``name``.

    Expiry is checked against the injected clock rather than PyJWT's own
    wall-clock check so that verification is deterministic under test.
    """

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, user: User) -> str:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        payload: dict[str, Any] = {
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: user={user.id} exp={expires_at.isoformat()}")
        return token

    def verify(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        try:
            claims = SessionClaims(
                user_id=int(payload["id"]),
                email=str(payload["email"]),
                name=str(payload["name"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.debug("tokens.verify: rejected (malformed claims)")
            raise InvalidTokenError() from exc

        if self._clock() >= claims.expires_at:
            logger.debug(f"tokens.verify: rejected (expired) user={claims.user_id}")
            raise InvalidTokenError()
        return claims


__all__ = ["DEFAULT_TOKEN_TTL", "JwtTokenService"]
