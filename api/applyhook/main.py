import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from applyhook.config import Settings, settings
from applyhook.middleware import CorsGateMiddleware, RequestSizeLimitMiddleware
from applyhook.routers import applications

API_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the application for one deployment variant.

    *transport* replaces the network for outbound calls (tests).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for name in settings.missing_endpoints():
            logger.warning(
                "%s is not set; the %s handler cannot deliver", name, settings.handler_variant
            )
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Receive guild applications, store them in a sheet and announce them on Discord.",
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.transport = transport

    if settings.handler_variant == "cors":
        app.add_middleware(CorsGateMiddleware, settings=settings)
    app.add_middleware(RequestSizeLimitMiddleware, max_body_size=settings.max_body_size)

    # --- Exception Handlers ---

    # Starlette's base class, so routing errors (405 for unknown methods) are covered too
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": exc.status_code, "message": exc.detail}},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": {"code": 500, "message": "Internal server error"}},
        )

    # --- Routes ---

    @app.get("/health", summary="Health check")
    async def health_ping():
        missing = settings.missing_endpoints()
        return {
            "status": "degraded" if missing else "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": API_VERSION,
            "variant": settings.handler_variant,
            "missing": missing,
        }

    # Catch-all; must come after /health
    app.include_router(applications.router)

    return app


app = create_app(settings)


def run() -> None:
    """Console entry point: configure logging, then serve ``app``."""
    configure_logging(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
