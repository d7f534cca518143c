"""In-memory submission store with bounded capacity."""

from __future__ import annotations

import asyncio
from collections import OrderedDict
from uuid import UUID

from formflow_service_libs.error_handling import raise_resource_not_found
from formflow_service_libs.logging_utils import create_service_logger

from services.greeting_service.api_models import Submission
from services.greeting_service.protocols import SubmissionRepositoryProtocol

logger = create_service_logger("greeting.repository.memory")


class InMemorySubmissionRepository(SubmissionRepositoryProtocol):
    """Keeps submissions in insertion order and evicts the oldest when full."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._store: OrderedDict[str, Submission] = OrderedDict()
        self._lock = asyncio.Lock()

    async def save(self, submission: Submission) -> None:
        async with self._lock:
            self._store[submission.submission_id] = submission
            self._store.move_to_end(submission.submission_id)
            while len(self._store) > self.max_size:
                evicted_id, _ = self._store.popitem(last=False)
                logger.info("Evicted oldest submission", submission_id=evicted_id)

    async def get(self, submission_id: str, correlation_id: UUID | None = None) -> Submission:
        submission = self._store.get(submission_id)
        if submission is None:
            raise_resource_not_found(
                service="greeting_service",
                operation="get_submission",
                resource_type="submission",
                resource_id=submission_id,
                correlation_id=correlation_id,
            )
        return submission

    async def search(
        self,
        first_name: str = "",
        last_name: str = "",
        limit: int = 20,
    ) -> list[Submission]:
        first_prefix = first_name.strip().casefold()
        last_prefix = last_name.strip().casefold()

        matches: list[Submission] = []
        for submission in reversed(self._store.values()):
            if not submission.first_name.casefold().startswith(first_prefix):
                continue
            if not submission.last_name.casefold().startswith(last_prefix):
                continue
            matches.append(submission)
            if len(matches) >= limit:
                break
        return matches

    async def count(self) -> int:
        return len(self._store)
