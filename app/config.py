"""Application configuration management using Pydantic Settings."""

from typing import Optional, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.formatting import CURRENCIES
from app.models.inflation import RealValueBasis


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_app: str = Field(default="wsgi.py", alias="FLASK_APP")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Calculator Configuration
    default_currency: str = Field(default="ARS", alias="DEFAULT_CURRENCY")
    # "years" deflates the final real balance by the horizon as entered,
    # "months" by the whole months actually compounded
    real_value_basis: RealValueBasis = Field(
        default="years", alias="REAL_VALUE_BASIS"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Ensure SECRET_KEY is provided and not a placeholder."""
        if not v or v == "your-secret-key-here-change-in-production":
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Validate application environment."""
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v):
        """Validate default display currency."""
        if v.upper() not in CURRENCIES:
            raise ValueError(f"DEFAULT_CURRENCY must be one of {sorted(CURRENCIES)}")
        return v.upper()

    @field_validator("real_value_basis", mode="before")
    @classmethod
    def validate_real_value_basis(cls, v):
        """Validate the final real balance deflation basis."""
        allowed_bases = set(get_args(RealValueBasis))
        if v not in allowed_bases:
            raise ValueError(f"REAL_VALUE_BASIS must be one of {allowed_bases}")
        return v


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Get application settings instance."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


# Global settings instance - created on first use
_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Reset global settings instance (useful for testing)."""
    global _settings
    _settings = None
