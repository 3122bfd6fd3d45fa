"""Spreadsheet storage forwarder.

The sheet sits behind a nocodeapi-style append endpoint which answers
``{"message": "Successfully Inserted"}`` when the row was written.
"""

import json
import logging

import httpx

from applyhook.config import Settings

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully Inserted"


async def insert_application(client: httpx.AsyncClient, settings: Settings, body: str) -> bool:
    """Append one normalized submission to the sheet. Never raises."""
    try:
        response = await client.post(
            settings.storage_url,
            content=json.dumps([json.loads(body)]),
            headers={"Content-Type": "application/json"},
        )
        result = response.json()
    except Exception as exc:
        logger.warning("Storage insert failed: %s", exc)
        return False

    if isinstance(result, dict) and result.get("message") == SUCCESS_MESSAGE:
        return True

    logger.warning(
        "Storage endpoint rejected submission (status %s): %.200s",
        response.status_code,
        response.text,
    )
    return False
