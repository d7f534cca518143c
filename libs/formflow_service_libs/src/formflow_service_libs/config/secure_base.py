"""
Base settings class shared by FormFlow services.

Provides environment helpers, secret handling for the session signing key
and string representations that never leak secrets.
"""

from __future__ import annotations

from formflow_core.config_enums import Environment
from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

DEVELOPMENT_SECRET_KEY = "dev-secret-change-me"


class SecureServiceSettings(BaseSettings):
    """Common settings for every FormFlow service."""

    SERVICE_NAME: str = "formflow-service"
    SERVICE_VERSION: str = "1.0.0"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )
    SECRET_KEY: SecretStr = Field(
        default=SecretStr(DEVELOPMENT_SECRET_KEY),
        description="Key used to sign session cookies (flash messages)",
    )

    @model_validator(mode="after")
    def _reject_development_secret_in_production(self) -> SecureServiceSettings:
        if (
            self.ENVIRONMENT == Environment.PRODUCTION
            and self.SECRET_KEY.get_secret_value() == DEVELOPMENT_SECRET_KEY
        ):
            raise ValueError("SECRET_KEY must be set explicitly in production")
        return self

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.ENVIRONMENT == Environment.TESTING

    def __str__(self) -> str:
        """Secure string representation that masks sensitive data."""
        return (
            f"{self.__class__.__name__}("
            f"service={self.SERVICE_NAME}, "
            f"version={self.SERVICE_VERSION}, "
            f"environment={self.ENVIRONMENT.value}, "
            f"secrets=***MASKED***)"
        )

    def __repr__(self) -> str:
        """Secure repr for debugging that masks sensitive data."""
        return self.__str__()
