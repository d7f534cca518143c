"""Tests for Greeting Service settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from services.greeting_service.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.SERVICE_NAME == "greeting-service"
        assert settings.REDIRECT_STATUS_CODE == 303
        assert settings.NAME_MAX_LENGTH == 64

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETING_SERVICE_NAME_MAX_LENGTH", "12")
        monkeypatch.setenv("GREETING_SERVICE_REDIRECT_STATUS_CODE", "302")

        settings = Settings()

        assert settings.NAME_MAX_LENGTH == 12
        assert settings.REDIRECT_STATUS_CODE == 302

    @pytest.mark.parametrize("code", [200, 301, 307, 308])
    def test_rejects_redirects_that_are_not_see_other_or_found(self, code: int) -> None:
        with pytest.raises(ValidationError, match="REDIRECT_STATUS_CODE"):
            Settings(REDIRECT_STATUS_CODE=code)

    def test_rejects_non_positive_limits(self) -> None:
        with pytest.raises(ValidationError):
            Settings(MAX_STORED_SUBMISSIONS=0)
