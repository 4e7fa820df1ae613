"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from fincore.app.api.routes import api_bp
from fincore.config import Settings, get_settings
from fincore.logging_config import configure_logging

SETTINGS_KEY = "FINCORE_SETTINGS"


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config[SETTINGS_KEY] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins_list}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
