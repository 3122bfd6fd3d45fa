import logging

from fastapi import APIRouter, Request
from starlette.responses import Response

from applyhook.channels.dispatcher import notify_application
from applyhook.config import Settings
from applyhook.http import outbound_client
from applyhook.normalize import read_request_body
from applyhook.response import error_response, success_response
from applyhook.storage import insert_application

logger = logging.getLogger("applications")

router = APIRouter(tags=["applications"])

INSERT_FAILED = "Inserting the application failed."


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    summary="Receive a guild application",
)
async def receive_application(path: str, request: Request) -> Response:
    settings: Settings = request.app.state.settings

    if request.method.upper() != "POST":
        return Response(status_code=405, headers={"Allow": "POST"})

    try:
        return await _handle_post(request, settings)
    except Exception as e:
        logger.exception("Application handling failed for /%s", path)
        status_code = 500 if settings.strict_status_codes else 200
        # No media type: the form page only shows the text
        return Response(content=f"Error thrown {e}", status_code=status_code)


async def _handle_post(request: Request, settings: Settings) -> Response:
    body = await read_request_body(request)

    async with outbound_client(settings, transport=request.app.state.transport) as client:
        if settings.handler_variant == "sheet":
            if not await insert_application(client, settings, body):
                status_code = 502 if settings.strict_status_codes else 200
                return error_response(INSERT_FAILED, status_code=status_code)

        # A failed notification is not a failed application
        await notify_application(client, settings, body)

    return success_response()
