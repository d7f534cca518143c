"""End-to-end redirect-after-POST flow through the running app."""

from __future__ import annotations

import re

from services.greeting_service.app import create_app
from services.greeting_service.config import Settings
from services.greeting_service.startup_setup import create_di_container

GREETING_PATH = re.compile(r"/greeting/[0-9a-f]{32}$")
THANKS = "Thanks, Ada! Your name has been saved."


async def test_post_redirect_get_flow(test_settings: Settings) -> None:
    app = create_app(container=create_di_container(test_settings), app_settings=test_settings)

    # test_app() runs the serving hooks, so the HTTP middleware metrics exist
    async with app.test_app() as test_app:
        client = test_app.test_client()

        response = await client.post("/", form={"first_name": "Ada", "last_name": "Lovelace"})
        assert response.status_code == 303
        location = response.headers["Location"]
        assert GREETING_PATH.search(location)

        greeting = await client.get(location)
        assert greeting.status_code == 200
        body = await greeting.get_data(as_text=True)
        assert "Hello, Ada Lovelace!" in body
        assert body.count(THANKS) == 1

        # Reloading is a plain GET: same page, flash already consumed, nothing re-submitted
        reloaded = await client.get(location)
        reloaded_body = await reloaded.get_data(as_text=True)
        assert "Hello, Ada Lovelace!" in reloaded_body
        assert THANKS not in reloaded_body

        lookup = await client.get("/lookup", query_string={"last_name": "love"})
        assert (await lookup.get_data(as_text=True)).count("Ada Lovelace") == 1

        metrics = await client.get("/metrics")
        metrics_body = await metrics.get_data(as_text=True)
        assert 'endpoint="/greeting/<string:submission_id>"' in metrics_body
        assert 'method="POST"' in metrics_body


async def test_redirect_status_is_configurable() -> None:
    settings = Settings(REDIRECT_STATUS_CODE=302)
    container = create_di_container(settings)
    app = create_app(container=container, app_settings=settings)

    async with app.test_client() as client:
        response = await client.post("/", form={"first_name": "Ada", "last_name": "Lovelace"})

    await container.close()

    assert response.status_code == 302
    assert GREETING_PATH.search(response.headers["Location"])


async def test_error_page_leaves_pending_flash_queued(test_settings: Settings) -> None:
    container = create_di_container(test_settings)
    app = create_app(container=container, app_settings=test_settings)

    async with app.test_client() as client:
        response = await client.post("/", form={"first_name": "Ada", "last_name": "Lovelace"})
        location = response.headers["Location"]

        error_page = await client.get("/greeting/not-an-id", headers={"Accept": "text/html"})
        assert error_page.status_code == 400
        assert THANKS not in await error_page.get_data(as_text=True)

        greeting = await client.get(location)
        assert (await greeting.get_data(as_text=True)).count(THANKS) == 1

    await container.close()
