"""
Pytest configuration and shared fixtures for the savings calculator tests.
"""

import os

import pytest

# Settings require a SECRET_KEY; provide one before the app is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key-123")

from app import create_app  # noqa: E402
from app.config import reset_global_settings  # noqa: E402
from app.models.projection import ScenarioInput  # noqa: E402


@pytest.fixture
def app():
    """Create a Flask application configured for testing."""
    reset_global_settings()
    application = create_app("testing")
    yield application
    reset_global_settings()


@pytest.fixture
def client(app):
    """Create a test client for the application."""
    return app.test_client()


@pytest.fixture
def basic_scenario():
    """A ten year scenario with monthly contributions."""
    return ScenarioInput(
        initial_capital=10000,
        years=10,
        annual_rate_percent=8,
        monthly_contribution=200,
    )
