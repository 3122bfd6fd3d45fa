"""Best-effort delivery of application notifications."""

import logging

import httpx

from applyhook.channels.discord import format_application
from applyhook.config import Settings
from applyhook.schemas.application import Submission

logger = logging.getLogger("notifications")


async def notify_application(client: httpx.AsyncClient, settings: Settings, body: str) -> None:
    """
    Post the Discord embed for a normalized body.

    Never raises: a failed notification must not turn an accepted
    application into an error response. Failures are logged here.
    """
    try:
        submission = Submission.from_body(body, settings.handler_variant)
        payload = format_application(submission, settings)
        response = await client.request(
            method=payload.method,
            url=payload.url,
            headers=payload.headers,
            content=payload.body,
        )
    except Exception as e:
        logger.error("Failed to send application notification: %s", e, exc_info=True)
        return

    if response.status_code >= 400:
        logger.warning(
            "Discord webhook returned status %s: %.200s", response.status_code, response.text
        )
    else:
        logger.debug("Application notification delivered")
