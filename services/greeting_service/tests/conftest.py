"""Shared fixtures for Greeting Service tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from formflow_service_libs.quart_app import FormFlowApp
from quart.typing import TestClientProtocol as QuartTestClient

from services.greeting_service.app import create_app
from services.greeting_service.config import Settings
from services.greeting_service.protocols import SubmissionRepositoryProtocol
from services.greeting_service.startup_setup import create_di_container


@pytest.fixture
def test_settings() -> Settings:
    """Settings with small limits so edge cases are cheap to reach."""
    return Settings(
        NAME_MAX_LENGTH=20,
        MAX_STORED_SUBMISSIONS=5,
        LOOKUP_RESULT_LIMIT=3,
    )


@pytest.fixture
async def app(test_settings: Settings) -> AsyncGenerator[FormFlowApp, None]:
    """Application wired with the real providers and test settings."""
    container = create_di_container(test_settings)
    app = create_app(container=container, app_settings=test_settings)
    app.config["TESTING"] = True
    yield app
    await container.close()


@pytest.fixture
async def client(app: FormFlowApp) -> AsyncGenerator[QuartTestClient, None]:
    async with app.test_client() as test_client:
        yield test_client


@pytest.fixture
async def repository(app: FormFlowApp) -> SubmissionRepositoryProtocol:
    """The repository instance the app resolves through DI."""
    return await app.container.get(SubmissionRepositoryProtocol)
