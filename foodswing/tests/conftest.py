from __future__ import annotations

import os
import tempfile

# Logging and auth settings are read when the app is built; keep the test
# values in place before anything from foodswing is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="foodswing-tests-")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "foodswing.log"))
os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-entropy-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402

from foodswing.shared.config import AppConfig  # noqa: E402


@pytest.fixture()
def config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> AppConfig:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    return AppConfig()


@pytest.fixture()
def app(config: AppConfig) -> Flask:
    from foodswing.app import create_app

    flask_app = create_app(config)
    yield flask_app
    flask_app.extensions["foodswing.container"].engine.dispose()


@pytest.fixture()
def engine(app: Flask) -> Engine:
    return app.extensions["foodswing.container"].engine


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
