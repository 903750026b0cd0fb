"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
Threshold defaults are not configured here: they live with the
analytics code in :mod:`app.analytics.thresholds`.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Athlete Risk & Load Analytics"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Stateless ACWR risk indicators, injury summaries, load trends and alerts."

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api/v1"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
