from __future__ import annotations

from datetime import UTC, datetime

import pytest
from flask import Flask, g, jsonify

from foodswing.application.services.tokens import JwtTokenService
from foodswing.application.use_cases.users.verify_session import (
    VerifySessionUseCase, extract_bearer_token)
from foodswing.domain.users.entities import User
from foodswing.domain.users.exceptions import InvalidTokenError, MissingTokenError
from foodswing.infrastructure.auth.session_middleware import current_user, require_auth
from foodswing.shared.middleware.error_handler import configure_error_handling

SECRET = "unit-test-secret-0123456789abcdef0123"


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET)


@pytest.fixture()
def token(tokens: JwtTokenService) -> str:
    user = User(
        id=3, name="Ann", email="ann@x.com", password_hash="h", created_at=datetime.now(UTC)
    )
    return tokens.issue(user)


@pytest.fixture()
def flask_app(tokens: JwtTokenService) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    authed = require_auth(VerifySessionUseCase(tokens=tokens))

    @app.get("/protected")
    @authed
    def protected():
        return jsonify({"success": True, "id": current_user().user_id, "g": g.user_id})

    return app


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "Basic abc", "Bearerabc", "Token x"])
def test_extract_bearer_token_rejects_malformed_headers(header: str | None) -> None:
    with pytest.raises(MissingTokenError):
        extract_bearer_token(header)


def test_extract_bearer_token_returns_token() -> None:
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize("scheme", ["bearer", "BEARER", "BeArEr"])
def test_extract_bearer_token_scheme_is_case_insensitive(scheme: str) -> None:
    assert extract_bearer_token(f"{scheme} abc.def.ghi") == "abc.def.ghi"


def test_verify_session_returns_claims(tokens: JwtTokenService, token: str) -> None:
    claims = VerifySessionUseCase(tokens=tokens).execute(f"Bearer {token}")
    assert claims.user_id == 3


def test_verify_session_rejects_bad_token(tokens: JwtTokenService) -> None:
    with pytest.raises(InvalidTokenError):
        VerifySessionUseCase(tokens=tokens).execute("Bearer nope")


def test_missing_token_returns_401(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/protected")

    assert response.status_code == 401
    assert response.get_json() == {"success": False, "message": "Access token required"}


def test_malformed_header_returns_401(flask_app: Flask, token: str) -> None:
    with flask_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": f"Token {token}"})

    assert response.status_code == 401


def test_invalid_token_returns_403(flask_app: Flask) -> None:
    with flask_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": "Bearer x.y.z"})

    assert response.status_code == 403
    assert response.get_json() == {"success": False, "message": "Invalid or expired token"}


def test_valid_token_injects_identity(flask_app: Flask, token: str) -> None:
    with flask_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "id": 3, "g": 3}
