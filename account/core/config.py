"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from account.shared.logging import LOG_FORMAT


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_format: Format string handed to the root log handler.
        api_prefix: Path prefix every router is mounted under.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="ACCOUNT_"
    )

    project_name: str = "Account Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = LOG_FORMAT
    api_prefix: str = "/api/v1"
    max_request_size_bytes: int = 1_048_576  # 1 MB


settings = Settings()
