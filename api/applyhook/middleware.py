"""Origin gate + request size middleware."""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from applyhook.config import Settings
from applyhook.response import ALLOW_METHODS, cors_headers

logger = logging.getLogger(__name__)

_PREFLIGHT_HEADERS = (
    "Origin",
    "Access-Control-Request-Method",
    "Access-Control-Request-Headers",
)


class CorsGateMiddleware(BaseHTTPMiddleware):
    """
    Only serve the one configured origin.

    - Any other (or missing) Origin gets an empty 405
    - OPTIONS from the allowed origin is answered here as a CORS preflight
    - Responses to the allowed origin carry the CORS headers
    """

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/health":
            return await call_next(request)

        origin = request.headers.get("Origin")
        if origin != self.settings.allowed_origin:
            logger.info("Rejected %s from origin %r", request.method, origin)
            return Response(status_code=405)

        if request.method.upper() == "OPTIONS":
            return self._preflight(request)

        response = await call_next(request)
        for header, value in cors_headers(self.settings).items():
            response.headers[header] = value
        return response

    def _preflight(self, request: Request) -> Response:
        if all(request.headers.get(h) is not None for h in _PREFLIGHT_HEADERS):
            return Response(
                headers={
                    **cors_headers(self.settings),
                    "Access-Control-Allow-Headers": request.headers[
                        "Access-Control-Request-Headers"
                    ],
                }
            )
        # Plain OPTIONS, not a CORS preflight
        return Response(headers={"Allow": ALLOW_METHODS})


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Reject application posts whose declared size exceeds ``max_body_size``.

    Only the Content-Length header is checked; a chunked upload without one
    is passed through and read in full by the route.
    """

    def __init__(self, app, max_body_size: int):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/health":
            return await call_next(request)

        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self.max_body_size:
            logger.info("Rejected %s byte body (limit %s)", declared, self.max_body_size)
            return JSONResponse(
                status_code=413,
                content={
                    "error": {
                        "code": 413,
                        "message": f"Request body too large. Max size is {self.max_body_size} bytes.",
                    }
                },
            )

        return await call_next(request)
