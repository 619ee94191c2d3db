"""
Credential-injecting relay for Bunny.net chapter updates.

The browser posts {libraryId, videoId, chapters}; the server adds the
library's API key and forwards the request, so the key never reaches
the client. Responses keep the {"error": ...} shape browser code expects.
"""

import json
import logging
from typing import Any, Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from app.dependencies import get_environ
from app.errors import ProcessorError
from app.bunny.upload import relay_chapters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["proxy"])


class InvalidBody(ValueError):
    """Request body is not JSON."""


def parse_body(raw: bytes) -> dict:
    """
    Parse the proxy request body.

    Accepts a JSON object or a JSON string holding a JSON object
    (double-encoded bodies). Anything that is not an object is
    treated as empty.

    Raises:
        InvalidBody: If the body (or the inner string) is not valid JSON
    """
    if not raw or not raw.strip():
        return {}

    try:
        body = json.loads(raw)
        if isinstance(body, str):
            body = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidBody(str(e)) from e

    return body if isinstance(body, dict) else {}


def _is_blank(value: Any) -> bool:
    # Missing, null, false, "" or 0
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0


@router.api_route(
    "/bunny",
    methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
    include_in_schema=True,
)
async def bunny_proxy(request: Request, environ: Mapping[str, str] = Depends(get_environ)):
    """
    Relay a chapter update to Bunny.net.

    Body: `{"libraryId": "...", "videoId": "...", "chapters": [...]}`.
    Only POST is accepted; OPTIONS answers 200 for preflight.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200)

    if request.method != "POST":
        return JSONResponse(status_code=405, content={"error": "Method Not Allowed"})

    try:
        try:
            body = parse_body(await request.body())
        except InvalidBody as e:
            logger.error("[API] Failed to parse body string: %s", e)
            return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

        raw_library_id = body.get("libraryId")
        video_id = body.get("videoId")
        chapters = body.get("chapters")

        target_lib_id = "" if _is_blank(raw_library_id) else str(raw_library_id).strip()

        logger.info("[API] Processing Request - Lib: %s, Video: %s", target_lib_id, video_id)

        if not target_lib_id or _is_blank(video_id) or _is_blank(chapters):
            return JSONResponse(
                status_code=400,
                content={"error": "Missing required fields: libraryId, videoId, or chapters."},
            )

        result = await run_in_threadpool(
            relay_chapters, target_lib_id, str(video_id), chapters, environ
        )
        return JSONResponse(status_code=200, content=result)

    except ProcessorError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_dict())
    except Exception as e:
        logger.exception("[API] Critical Server Error")
        return JSONResponse(status_code=500, content={"error": f"Internal Server Error: {e}"})
