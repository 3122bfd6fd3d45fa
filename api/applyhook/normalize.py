"""Turn an inbound request body into a JSON string, whatever its encoding."""

import json
import logging

from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request

logger = logging.getLogger(__name__)

# Returned for binary or unrecognised payloads; never decoded.
FILE_PLACEHOLDER = "a file"


async def read_request_body(request: Request) -> str:
    """
    Read the request body into its normalized string form.

    Checked in order against the lower-cased Content-Type:
      application/json  -> parsed and re-serialized
      application/text  -> raw text
      text/html         -> raw text
      *form*            -> entries folded into one object (last key wins)
      anything else     -> ``FILE_PLACEHOLDER``
    """
    content_type = request.headers.get("content-type", "").lower()

    if "application/json" in content_type:
        try:
            return json.dumps(await request.json())
        except ValueError:
            logger.warning("Unparseable JSON body, treating as opaque payload")
            return FILE_PLACEHOLDER
    elif "application/text" in content_type:
        return await _read_text(request)
    elif "text/html" in content_type:
        return await _read_text(request)
    elif "form" in content_type:
        try:
            form = await request.form()
        except (HTTPException, MultiPartException) as exc:
            logger.warning("Unparseable form body, treating as opaque payload: %s", exc)
            return FILE_PLACEHOLDER
        body = {}
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                value = value.filename or ""
            body[key] = value
        return json.dumps(body)
    else:
        return FILE_PLACEHOLDER


async def _read_text(request: Request) -> str:
    raw = await request.body()
    return raw.decode("utf-8", errors="replace")
