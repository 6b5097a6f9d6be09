"""Tests for Flask application startup with configuration."""

import logging
import os
from unittest.mock import patch

import pytest

from app import create_app
from app.config import reset_global_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reset global settings around each test to allow environment patching."""
    reset_global_settings()
    yield
    reset_global_settings()


class TestAppStartup:
    """Test cases for Flask application startup."""

    def test_app_creation_with_valid_config(self):
        """Test that app creates successfully with valid configuration."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            app = create_app()

            assert app is not None
            assert app.config["SECRET_KEY"] == "valid-secret-key-123"
            assert app.config["DEFAULT_CURRENCY"] == "ARS"
            assert app.config["REAL_VALUE_BASIS"] == "years"

    def test_app_creation_fails_with_placeholder_secret_key(self):
        """Test that app creation fails with placeholder SECRET_KEY."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "your-secret-key-here-change-in-production"},
            clear=True,
        ):
            with pytest.raises(Exception) as exc_info:
                create_app()

            assert "SECRET_KEY must be set to a secure value" in str(exc_info.value)

    def test_app_uses_custom_environment_variables(self):
        """Test that app uses custom environment variables."""
        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "custom-secret-key",
                "APP_ENV": "production",
                "DEFAULT_CURRENCY": "MXN",
                "REAL_VALUE_BASIS": "months",
                "LOG_LEVEL": "ERROR",
            },
            clear=True,
        ):
            app = create_app()

            assert app.config["SECRET_KEY"] == "custom-secret-key"
            assert app.config["DEFAULT_CURRENCY"] == "MXN"
            assert app.config["REAL_VALUE_BASIS"] == "months"
            assert app.config["ENV"] == "development"  # flask_env default
            assert app.config["DEBUG"] is False  # production env
            assert app.logger.level == logging.ERROR

    def test_app_debug_mode_based_on_environment(self):
        """Test that debug mode is set based on APP_ENV."""
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "APP_ENV": "development"},
            clear=True,
        ):
            assert create_app().config["DEBUG"] is True

        reset_global_settings()
        with patch.dict(
            os.environ,
            {"SECRET_KEY": "valid-secret-key-123", "APP_ENV": "production"},
            clear=True,
        ):
            assert create_app().config["DEBUG"] is False

    def test_testing_flag(self):
        """Test that the testing configuration name sets TESTING."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            assert create_app("testing").config["TESTING"] is True

    def test_blueprints_registered(self):
        """Test that health and calculator blueprints are registered."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-key-123"}, clear=True):
            app = create_app()

            assert "health" in app.blueprints
            assert "calculator" in app.blueprints
