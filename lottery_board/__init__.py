"""Flask application package for the Tết lottery results board."""

from __future__ import annotations

from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(config_overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        config_overrides: Values applied on top of the environment config
            (used by tests and scripts).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from lottery_board.config import get_config
    from lottery_board.error_handlers import register_error_handlers
    from lottery_board.logging_config import configure_logging
    from lottery_board.routes.health import health_bp
    from lottery_board.routes.results import results_bp
    from lottery_board.routes.web import web_bp
    from lottery_board.storage import init_storage

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    # Vietnamese labels and messages stay readable in API responses
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    configure_logging(app)
    init_storage(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(results_bp, url_prefix="/api")

    return app
