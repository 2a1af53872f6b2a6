# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from foodswing.infrastructure.container import Container
from foodswing.infrastructure.db import build_engine, init_db
from foodswing.shared.config import AppConfig, load_config
from foodswing.shared.logging import logger, setup_logging
from foodswing.shared.middleware.error_handler import configure_error_handling
from foodswing.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = container or Container(config, build_engine(config.database))
    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app, config)
    configure_request_logging(app, config)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.mood_controller.as_blueprint())
    app.register_blueprint(container.contact_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    app.extensions["foodswing.container"] = container
    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"FoodSwing backend running on port {config.port}")
    app.run(host=config.host, port=config.port, debug=not config.is_production())


if __name__ == "__main__":
    main()
