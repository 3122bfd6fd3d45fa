"""Outbound HTTP client construction."""

from typing import Optional

import httpx

from applyhook.config import Settings


def outbound_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.outbound_timeout,
        follow_redirects=True,
        transport=transport,
        **kwargs,
    )
