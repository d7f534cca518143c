"""Configuration utilities for FormFlow services."""

from .secure_base import DEVELOPMENT_SECRET_KEY, SecureServiceSettings

__all__ = ["DEVELOPMENT_SECRET_KEY", "SecureServiceSettings"]
