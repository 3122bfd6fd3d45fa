"""Response helpers for the application endpoint."""

import json
from typing import Any, Optional

from starlette.responses import Response

from applyhook.config import Settings

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
CORS_ALLOW_METHODS = "GET,HEAD,POST,OPTIONS"
ALLOW_METHODS = "GET, HEAD, POST, OPTIONS"


def status_response(
    content: dict[str, Any],
    status_code: int = 200,
    headers: Optional[dict[str, str]] = None,
) -> Response:
    """JSON status body, pretty-printed the way the form page expects it."""
    return Response(
        content=json.dumps(content, indent=2),
        status_code=status_code,
        headers={"Content-Type": JSON_CONTENT_TYPE, **(headers or {})},
    )


def success_response() -> Response:
    return status_response({"status": "SUCCESS"})


def error_response(message: str, status_code: int = 200) -> Response:
    return status_response({"status": "ERROR", "message": message}, status_code=status_code)


def cors_headers(settings: Settings) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }
