"""Unit tests for InMemorySubmissionRepository."""

from __future__ import annotations

import asyncio
import uuid

import pytest
from formflow_service_libs.error_handling import FormFlowError

from services.greeting_service.api_models import Submission
from services.greeting_service.implementations.in_memory_submission_repository import (
    InMemorySubmissionRepository,
)


def make_submission(first_name: str, last_name: str) -> Submission:
    return Submission(first_name=first_name, last_name=last_name, correlation_id=uuid.uuid4())


@pytest.fixture
def repository() -> InMemorySubmissionRepository:
    return InMemorySubmissionRepository(max_size=3)


class TestSaveAndGet:
    async def test_round_trip(self, repository: InMemorySubmissionRepository) -> None:
        submission = make_submission("Ada", "Lovelace")

        await repository.save(submission)

        assert await repository.get(submission.submission_id) == submission
        assert await repository.count() == 1

    async def test_unknown_id_raises_not_found(
        self, repository: InMemorySubmissionRepository
    ) -> None:
        correlation_id = uuid.uuid4()

        with pytest.raises(FormFlowError) as exc_info:
            await repository.get("0" * 32, correlation_id)

        assert exc_info.value.error_code == "RESOURCE_NOT_FOUND"
        assert exc_info.value.correlation_id == str(correlation_id)

    async def test_evicts_oldest_when_full(self, repository: InMemorySubmissionRepository) -> None:
        submissions = [make_submission(f"Name{'a' * i}", "Test") for i in range(4)]
        for submission in submissions:
            await repository.save(submission)

        assert await repository.count() == 3
        with pytest.raises(FormFlowError):
            await repository.get(submissions[0].submission_id)
        assert await repository.get(submissions[3].submission_id) == submissions[3]

    async def test_concurrent_saves_respect_capacity(self) -> None:
        repository = InMemorySubmissionRepository(max_size=10)

        await asyncio.gather(
            *(repository.save(make_submission("Ada", "Lovelace")) for _ in range(25))
        )

        assert await repository.count() == 10


class TestSearch:
    async def test_prefix_match_is_case_insensitive(
        self, repository: InMemorySubmissionRepository
    ) -> None:
        await repository.save(make_submission("Ada", "Lovelace"))
        await repository.save(make_submission("Alan", "Turing"))
        await repository.save(make_submission("Grace", "Hopper"))

        results = await repository.search(first_name="a")

        assert [s.first_name for s in results] == ["Alan", "Ada"]

    async def test_both_prefixes_must_match(
        self, repository: InMemorySubmissionRepository
    ) -> None:
        await repository.save(make_submission("Ada", "Lovelace"))
        await repository.save(make_submission("Ada", "Byron"))

        results = await repository.search(first_name="ADA", last_name="by")

        assert [s.full_name for s in results] == ["Ada Byron"]

    async def test_limit(self, repository: InMemorySubmissionRepository) -> None:
        for _ in range(3):
            await repository.save(make_submission("Ada", "Lovelace"))

        assert len(await repository.search(first_name="Ada", limit=2)) == 2
