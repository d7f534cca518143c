"""Correlation context extracted from incoming requests."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from uuid import UUID

from quart import Request

CORRELATION_HEADER = "X-Correlation-ID"


@dataclass(frozen=True)
class CorrelationContext:
    """Correlation identifiers for one request.

    original: the value as received (or generated), echoed back to clients
    uuid: a UUID usable in ErrorDetail; derived deterministically when the
        original value is not itself a UUID
    source: "header", "query" or "generated"
    """

    original: str
    uuid: UUID
    source: str


def _to_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        return uuid.uuid5(uuid.NAMESPACE_OID, value)


def extract_correlation_context_from_request(request: Request) -> CorrelationContext:
    """Read the correlation id from the header or query string, or generate one."""
    header_value = request.headers.get(CORRELATION_HEADER)
    if header_value:
        return CorrelationContext(header_value, _to_uuid(header_value), "header")

    query_value = request.args.get("correlation_id")
    if query_value:
        return CorrelationContext(query_value, _to_uuid(query_value), "query")

    generated = uuid.uuid4()
    return CorrelationContext(str(generated), generated, "generated")
