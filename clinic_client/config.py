"""
Configuration module for the clinic gateway client.
Uses Pydantic BaseSettings so values come from the environment or a .env file.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings with validation.
    Every field has a default, so importing the package never fails.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gateway Configuration
    api_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the API gateway, prefixed to every path"
    )
    api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds"
    )

    # Session Configuration
    session_db_path: str = Field(
        default="data/session.db",
        description="SQLite file holding the persisted session token"
    )
    clear_session_on_unauthorized: bool = Field(
        default=False,
        description="Clear the stored token when the gateway answers 401"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="text", description="'json' or 'text'")


# Create global settings instance
settings = Settings()

# Backwards-compatible exports for existing code
API_BASE_URL = settings.api_base_url
API_TIMEOUT = settings.api_timeout
