# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from pathlib import Path

from flask import Flask

from authgate.infrastructure.container import Container, container
from authgate.infrastructure.db import init_db
from authgate.shared.logging import logger, setup_logging
from authgate.shared.middleware.error_handler import configure_error_handling
from authgate.shared.middleware.request_logger import configure_request_logging
from authgate.shared.middleware.security_headers import \
    configure_security_headers

HTTP_DIR = Path(__file__).resolve().parent / "interfaces" / "http"
STATIC_DIR = HTTP_DIR / "static"
TEMPLATES_DIR = HTTP_DIR / "templates"


def create_app(app_container: Container | None = None) -> Flask:
    deps = app_container or container
    config = deps.config
    setup_logging(debug_mode=config.debug_logging)

    # The process keeps serving when the database is unreachable; requests
    # then fail with 500 until it comes back.
    init_db()

    app = Flask(
        __name__,
        static_folder=str(STATIC_DIR),
        static_url_path="/static",
        template_folder=str(TEMPLATES_DIR),
    )
    app.config.update(SECRET_KEY=config.secret_key)

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    app.register_blueprint(deps.pages_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=False)
