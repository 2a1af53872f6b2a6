# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, cast

from flask import g, request

from foodswing.application.use_cases.users.verify_session import VerifySessionUseCase
from foodswing.domain.users.entities import SessionClaims
from foodswing.domain.users.exceptions import InvalidTokenError, MissingTokenError
from foodswing.shared.logging import logger


def require_auth(
    verify_session: VerifySessionUseCase,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Build a decorator that only lets requests with a valid bearer token through.

    The verified claims are stored on ``flask.g.user`` for the wrapped view.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                claims = verify_session.execute(request.headers.get("Authorization"))
            except MissingTokenError:
                logger.warning(
                    f"No bearer token on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise
            except InvalidTokenError:
                logger.warning(
                    f"Auth failed (token invalid/expired) on {request.method} {request.path}"
                )
                raise

            g.user = claims
            g.user_id = claims.user_id
            logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
            return func(*args, **kwargs)

        return wrapper

    return decorator


def current_user() -> SessionClaims:
    """Return the claims stored by :func:`require_auth` for this request."""
    return cast(SessionClaims, g.user)


__all__ = ["current_user", "require_auth"]
