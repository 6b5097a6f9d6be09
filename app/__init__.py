"""Savings Calculator Flask Application Factory."""

from typing import Optional

from flask import Flask

from app.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production)

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["DEFAULT_CURRENCY"] = settings.default_currency
    app.config["REAL_VALUE_BASIS"] = settings.real_value_basis
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = (config_name or settings.app_env) == "testing"
    app.logger.setLevel(settings.log_level)

    # Register blueprints
    from app.blueprints.calculator import calculator_bp
    from app.blueprints.health import health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(calculator_bp)

    return app
