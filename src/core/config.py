"""Application configuration using Pydantic Settings."""

import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Fixed listen address; not part of the configurable surface
HOST = "0.0.0.0"
PORT = 8080


class Settings(BaseSettings):
    """Application settings loaded once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "summarize-relay"
    log_level: str = "INFO"

    # Gemini Configuration
    gemini_api_key: str = Field(min_length=1)


def load_settings() -> Settings:
    """
    Read settings from the environment, exiting if they are invalid.

    Raises:
        SystemExit: If GEMINI_API_KEY is missing or any setting fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]).upper() for err in e.errors() if err["loc"]})
        if fields == ["GEMINI_API_KEY"]:
            logger.critical("GEMINI_API_KEY environment variable not set")
        else:
            logger.critical(f"Invalid configuration: {', '.join(fields)}")
        raise SystemExit(1) from e
