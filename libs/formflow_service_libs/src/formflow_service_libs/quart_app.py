"""
Type-safe Quart application class for FormFlow services.

FormFlowApp gives app-level infrastructure typed attributes instead of
setattr()/getattr() on a plain Quart instance.
"""

from __future__ import annotations

from typing import Any

from dishka import AsyncContainer
from quart import Quart


class FormFlowApp(Quart):
    """Quart application with guaranteed FormFlow infrastructure.

    GUARANTEED INFRASTRUCTURE:
        container: Dishka async container for dependency injection
        extensions: Standard Quart extensions dictionary (metrics live here)

    The container is NOT created in __init__; the service's create_app
    factory must assign it immediately.

    Examples:
        >>> def create_app() -> FormFlowApp:
        ...     app = FormFlowApp(__name__)
        ...     app.container = make_async_container(...)
        ...     return app
    """

    container: AsyncContainer
    """Dishka async container, set by create_app."""

    extensions: dict[str, Any]
    """Standard Quart extensions dictionary."""

    def __init__(self, import_name: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(import_name, *args, **kwargs)
        self.extensions = {}
