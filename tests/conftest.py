"""Shared fixtures: settings per variant, canned answers, recorded outbound calls."""

import json
from typing import Callable, Optional

import httpx
import pytest

from applyhook.config import Settings

STORAGE_URL = "https://v1.nocodeapi.test/sheets/abc"
WEBHOOK_URL = "https://discord.com/api/webhooks/1/token"
ALLOWED_ORIGIN = "https://apply.example.com"

SOLO_ANSWERS = [
    "Tester.1234",
    "tester#0001",
    "dT",
    "ABCD-EFGH",
    "https://killproof.me/proof/Tester.1234",
    "Yes",
    "Firebrand,Scourge",
    "Renegade,Harbinger",
    "Solo",
    "",
    "",
    "https://dps.report/abc",
    "Evenings EU",
    "Alice,Bob",
    "Cleared all raids",
    "Looking for a home",
]

STATIC_ANSWERS = SOLO_ANSWERS[:8] + [
    "Static",
    "https://dps.report/static",
    "Kite the altars",
    "",
    "",
    "",
    "Cleared all raids",
    "Looking for a home",
]

CORS_ANSWERS = SOLO_ANSWERS[:8] + SOLO_ANSWERS[11:]


def make_settings(**overrides) -> Settings:
    values = {
        "storage_url": STORAGE_URL,
        "discord_webhook_url": WEBHOOK_URL,
        "allowed_origin": ALLOWED_ORIGIN,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class OutboundRecorder:
    """MockTransport handler that records requests and answers per host URL."""

    def __init__(self, storage: Optional[Callable] = None, webhook: Optional[Callable] = None):
        self.requests: list[httpx.Request] = []
        self.storage = storage or (lambda req: httpx.Response(200, json={"message": "Successfully Inserted"}))
        self.webhook = webhook or (lambda req: httpx.Response(204))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == STORAGE_URL:
            return self.storage(request)
        if str(request.url) == WEBHOOK_URL:
            return self.webhook(request)
        return httpx.Response(404)

    def to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == url]

    def json_to(self, url: str) -> list:
        return [json.loads(r.content) for r in self.to(url)]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def cors_settings() -> Settings:
    return make_settings(handler_variant="cors")


@pytest.fixture
def recorder() -> OutboundRecorder:
    return OutboundRecorder()
