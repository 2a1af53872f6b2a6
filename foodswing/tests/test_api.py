from __future__ import annotations

from flask.testing import FlaskClient

from foodswing.domain.moods.entities import HISTORY_LIMIT
from foodswing.interfaces.http.controllers.misc_controller import MiscController


def _signup(client: FlaskClient, name="Ann", email="ann@x.com", password="secret1"):
    return client.post(
        "/api/auth/signup",
        json={"name": name, "email": email, "password": password},
    )


def _auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_signup_login_and_mood_flow(client: FlaskClient) -> None:
    signup = _signup(client)
    assert signup.status_code == 201
    signup_payload = signup.get_json()
    assert signup_payload["success"] is True
    assert signup_payload["token"]
    user_id = signup_payload["user"]["id"]

    login = client.post("/api/auth/login", json={"email": "ann@x.com", "password": "secret1"})
    assert login.status_code == 200
    login_payload = login.get_json()
    assert login_payload["user"]["id"] == user_id
    token = login_payload["token"]

    wrong = client.post("/api/auth/login", json={"email": "ann@x.com", "password": "nope"})
    assert wrong.status_code == 400
    assert wrong.get_json() == {"success": False, "message": "Invalid email or password"}

    select = client.post("/api/mood/select", json={"mood": "happy"}, headers=_auth_header(token))
    assert select.status_code == 200
    assert select.get_json()["success"] is True

    history = client.get("/api/mood/history", headers=_auth_header(token))
    assert history.status_code == 200
    entries = history.get_json()["history"]
    assert len(entries) == 1
    assert entries[0]["mood"] == "happy"
    assert entries[0]["userId"] == user_id
    assert "timestamp" in entries[0]


def test_unknown_email_and_wrong_password_look_the_same(client: FlaskClient) -> None:
    _signup(client)

    unknown = client.post("/api/auth/login", json={"email": "bob@x.com", "password": "secret1"})
    wrong = client.post("/api/auth/login", json={"email": "ann@x.com", "password": "bad"})

    assert unknown.status_code == wrong.status_code == 400
    assert unknown.get_json() == wrong.get_json()


def test_duplicate_signup_is_rejected_and_keeps_one_user(client: FlaskClient) -> None:
    token = _signup(client).get_json()["token"]

    duplicate = _signup(client, name="Other", password="another")
    assert duplicate.status_code == 400
    assert duplicate.get_json()["message"] == "Email already registered"

    analytics = client.get("/api/admin/analytics", headers=_auth_header(token))
    assert analytics.get_json()["analytics"]["totalUsers"] == 1


def test_verify_returns_decoded_claims(client: FlaskClient) -> None:
    payload = _signup(client).get_json()

    response = client.get("/api/auth/verify", headers=_auth_header(payload["token"]))

    assert response.status_code == 200
    user = response.get_json()["user"]
    assert user["id"] == payload["user"]["id"]
    assert user["email"] == "ann@x.com"
    assert user["name"] == "Ann"
    assert user["exp"] - user["iat"] == 7 * 24 * 3600


def test_protected_routes_require_a_valid_token(client: FlaskClient) -> None:
    missing = client.get("/api/mood/history")
    assert missing.status_code == 401
    assert missing.get_json() == {"success": False, "message": "Access token required"}

    malformed = client.get("/api/mood/history", headers={"Authorization": "Token abc"})
    assert malformed.status_code == 401

    invalid = client.get("/api/mood/history", headers=_auth_header("not-a-jwt"))
    assert invalid.status_code == 403
    assert invalid.get_json() == {"success": False, "message": "Invalid or expired token"}


def test_mood_select_requires_a_mood(client: FlaskClient) -> None:
    token = _signup(client).get_json()["token"]

    response = client.post("/api/mood/select", json={"mood": ""}, headers=_auth_header(token))

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide a mood"


def test_history_is_capped_and_newest_first(client: FlaskClient) -> None:
    token = _signup(client).get_json()["token"]
    for index in range(HISTORY_LIMIT + 5):
        client.post("/api/mood/select", json={"mood": f"m{index}"}, headers=_auth_header(token))

    entries = client.get("/api/mood/history", headers=_auth_header(token)).get_json()["history"]

    assert len(entries) == HISTORY_LIMIT
    assert entries[0]["mood"] == f"m{HISTORY_LIMIT + 4}"
    assert entries[-1]["mood"] == "m5"


def test_history_only_contains_own_selections(client: FlaskClient) -> None:
    ann = _signup(client).get_json()["token"]
    bob = _signup(client, name="Bob", email="bob@x.com").get_json()["token"]
    client.post("/api/mood/select", json={"mood": "sad"}, headers=_auth_header(bob))

    entries = client.get("/api/mood/history", headers=_auth_header(ann)).get_json()["history"]

    assert entries == []


def test_contact_submission_and_admin_views(client: FlaskClient) -> None:
    first = client.post(
        "/api/contact",
        json={"name": "Ann", "email": "ann@x.com", "message": "Love it"},
    )
    assert first.status_code == 200
    client.post("/api/contact", json={"name": "Bob", "email": "bob@x.com", "message": "More tacos"})

    token = _signup(client, email="reader@x.com").get_json()["token"]
    client.post("/api/mood/select", json={"mood": "happy"}, headers=_auth_header(token))
    client.post("/api/mood/select", json={"mood": "happy"}, headers=_auth_header(token))
    client.post("/api/mood/select", json={"mood": "angry"}, headers=_auth_header(token))

    contacts = client.get("/api/admin/contacts", headers=_auth_header(token)).get_json()["contacts"]
    assert [c["name"] for c in contacts] == ["Bob", "Ann"]
    assert "createdAt" in contacts[0]

    analytics = client.get("/api/admin/analytics", headers=_auth_header(token)).get_json()["analytics"]
    assert analytics["totalUsers"] == 1
    assert analytics["totalMoodSelections"] == 3
    assert analytics["totalContacts"] == 2
    assert analytics["moodStats"] == [
        {"mood": "happy", "count": 2},
        {"mood": "angry", "count": 1},
    ]


def test_contact_rejects_missing_fields_and_bad_email(client: FlaskClient) -> None:
    missing = client.post("/api/contact", json={"name": "Ann", "email": "ann@x.com"})
    assert missing.status_code == 400
    assert missing.get_json()["message"] == "Please provide all fields"

    bad_email = client.post(
        "/api/contact",
        json={"name": "Ann", "email": "not-an-email", "message": "hi"},
    )
    assert bad_email.status_code == 400
    assert bad_email.get_json()["message"] == "Please provide a valid email address"


def test_admin_routes_require_a_session(client: FlaskClient) -> None:
    assert client.get("/api/admin/contacts").status_code == 401
    assert client.get("/api/admin/analytics").status_code == 401


def test_health_and_blog(client: FlaskClient) -> None:
    health = client.get("/api/health")
    assert health.status_code == 200
    payload = health.get_json()
    assert payload["success"] is True
    assert payload["database"] == "ok"
    assert payload["timestamp"]

    posts = client.get("/api/blog/posts").get_json()["posts"]
    assert posts
    assert {"id", "title", "excerpt", "date", "readTime", "tag"} <= set(posts[0])


def test_health_reports_database_failure() -> None:
    from flask import Flask

    def broken_probe() -> bool:
        raise RuntimeError("database unavailable")

    app = Flask(__name__)
    app.register_blueprint(MiscController(database_probe=broken_probe).as_blueprint())

    with app.test_client() as test_client:
        response = test_client.get("/api/health")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["database"] == "error: database unavailable"


def test_unknown_route_uses_error_envelope(client: FlaskClient) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "message": "Not Found"}


def test_security_headers_are_set(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_app_stores_users_in_the_configured_database(tmp_path, monkeypatch) -> None:
    from sqlalchemy import text

    from foodswing.app import create_app
    from foodswing.shared.config import AppConfig

    target = tmp_path / "other.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{target}")
    app = create_app(AppConfig())
    engine = app.extensions["foodswing.container"].engine

    with app.test_client() as test_client:
        assert _signup(test_client).status_code == 201

    with engine.connect() as connection:
        count = connection.execute(text("SELECT COUNT(*) FROM users")).scalar_one()
    engine.dispose()

    assert target.exists()
    assert count == 1


def test_long_password_is_accepted(client: FlaskClient) -> None:
    password = "p" * 129

    signup = _signup(client, password=password)
    assert signup.status_code == 201

    login = client.post("/api/auth/login", json={"email": "ann@x.com", "password": password})
    assert login.status_code == 200


def test_overlong_name_is_reported_as_too_long(client: FlaskClient) -> None:
    response = _signup(client, name="A" * 300)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Name is too long"


def test_store_failure_returns_server_error_envelope(client: FlaskClient, engine) -> None:
    from foodswing.infrastructure.db import Base

    token = _signup(client).get_json()["token"]
    Base.metadata.tables["mood_selections"].drop(engine)

    response = client.get("/api/mood/history", headers=_auth_header(token))

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "message": "Server error. Please try again."}
