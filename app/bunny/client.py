"""
Bunny.net Stream API client for updating video chapters.
"""

import logging
from typing import Any, Optional, Union

import requests

from app.settings import get_settings
from app.errors import BunnyUpstreamError, BunnyTimeoutError, BunnyConnectionError
from app.schemas import BunnyChapter


logger = logging.getLogger(__name__)


def build_video_url(library_id: str, video_id: str, base_url: Optional[str] = None) -> str:
    """
    Build the Stream API URL for a video.

    Args:
        library_id: Bunny.net library ID
        video_id: Video GUID
        base_url: API base URL (uses settings if None)

    Returns:
        Full video endpoint URL
    """
    base_url = (base_url or get_settings().BUNNY_API_BASE_URL).rstrip("/")
    return f"{base_url}/library/{library_id}/videos/{video_id}"


def _serialize_chapters(chapters: list[Union[BunnyChapter, dict, Any]]) -> list:
    return [c.model_dump() if isinstance(c, BunnyChapter) else c for c in chapters]


def update_video_chapters(
    library_id: str,
    video_id: str,
    chapters: Any,
    api_key: str,
    timeout: Optional[float] = None,
) -> dict:
    """
    Replace the chapters of a Bunny.net video.

    Args:
        library_id: Bunny.net library ID
        video_id: Video GUID
        chapters: Chapter list, sent as {"chapters": chapters}
        api_key: Library API key (AccessKey header)
        timeout: Seconds to wait (uses BUNNY_TIMEOUT_SECONDS if None)

    Returns:
        {"success": True, "data": ...} for JSON responses, or
        {"success": True, "message": ..., "raw": ...} otherwise

    Raises:
        BunnyUpstreamError: Bunny.net returned a non-2xx status
        BunnyTimeoutError: No answer within the timeout
        BunnyConnectionError: Connection, DNS or TLS failure
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.BUNNY_TIMEOUT_SECONDS

    if isinstance(chapters, list):
        chapters = _serialize_chapters(chapters)

    url = build_video_url(library_id, video_id)

    try:
        response = requests.post(
            url,
            headers={
                "AccessKey": api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            json={"chapters": chapters},
            timeout=timeout,
        )
    except requests.exceptions.Timeout as e:
        raise BunnyTimeoutError(
            f"Request timed out after {timeout:g} seconds. Please try again."
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("[API] Bunny request failed: %s", e)
        raise BunnyConnectionError(str(e)) from e

    response_text = response.text

    if not 200 <= response.status_code < 300:
        logger.error("[API] Bunny Upstream Error (%s): %s", response.status_code, response_text)
        raise BunnyUpstreamError(response.status_code, response_text)

    logger.info("[API] Success")

    try:
        data = response.json()
    except ValueError:
        return {
            "success": True,
            "message": "Updated, but response was not JSON",
            "raw": response_text,
        }

    return {"success": True, "data": data}
