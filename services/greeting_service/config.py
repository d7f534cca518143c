"""
Configuration module for the FormFlow Greeting Service.

This module defines the settings for the name form service, including
validation limits, redirect behaviour, logging levels and service ports.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv
from formflow_service_libs.config import SecureServiceSettings
from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

# Load .env file from repository root, regardless of current working directory
load_dotenv(find_dotenv(".env"))

# 307/308 would make the browser repeat the POST against the result page
ALLOWED_REDIRECT_STATUS_CODES = frozenset({302, 303})


class Settings(SecureServiceSettings):
    """
    Configuration settings for the Greeting Service.

    These settings can be overridden via environment variables prefixed with
    GREETING_SERVICE_.
    """

    SERVICE_NAME: str = "greeting-service"
    LOG_LEVEL: str = "INFO"

    # Quart app.run() parameters
    DEBUG: bool = False
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8090

    # Form handling
    NAME_MAX_LENGTH: int = Field(
        default=64, ge=1, description="Maximum length of first and last names"
    )
    REDIRECT_STATUS_CODE: int = Field(
        default=303, description="Status code of the redirect sent after a successful POST"
    )

    # Submission store
    MAX_STORED_SUBMISSIONS: int = Field(
        default=1000, ge=1, description="Submissions kept in memory before the oldest is evicted"
    )
    LOOKUP_RESULT_LIMIT: int = Field(
        default=20, ge=1, description="Maximum rows shown on the lookup page"
    )

    @field_validator("REDIRECT_STATUS_CODE")
    @classmethod
    def _validate_redirect_status(cls, value: int) -> int:
        if value not in ALLOWED_REDIRECT_STATUS_CODES:
            raise ValueError(
                f"REDIRECT_STATUS_CODE must be one of {sorted(ALLOWED_REDIRECT_STATUS_CODES)}"
            )
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="GREETING_SERVICE_",
    )


# Create a single instance for the application to use
settings = Settings()
