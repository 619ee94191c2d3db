"""
Chapter upload flow: validate, resolve the server-held key, relay to Bunny.net.

This is the single path used by the /api/bunny proxy, the
/v1/bunny/chapters endpoint and the CLI, so the API key never
leaves the server.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from app.errors import ChapterValidationError, MissingCredentialError
from app.schemas import BunnyChapter
from app.bunny.chapters import parse_chapter_input
from app.bunny.client import update_video_chapters
from app.bunny.credentials import resolve_api_key, visible_key_names
from app.bunny.libraries import resolve_library_id


logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    """Result of relaying chapters for one video."""
    library_id: str
    video_id: str
    chapters: list[BunnyChapter] = field(default_factory=list)
    response: dict = field(default_factory=dict)


def relay_chapters(
    library_id: str,
    video_id: str,
    chapters: Any,
    environ: Optional[Mapping[str, str]] = None,
) -> dict:
    """
    Send chapters to Bunny.net with the key resolved for the library.

    The chapter payload is forwarded as given.

    Args:
        library_id: Bunny.net library ID
        video_id: Video GUID
        chapters: Chapter list
        environ: Environment to resolve keys from (defaults to os.environ)

    Returns:
        Result dict from update_video_chapters

    Raises:
        MissingCredentialError: No key for the library
        BunnyUpstreamError / BunnyTimeoutError: From the client
    """
    resolved = resolve_api_key(library_id, environ)

    if resolved is None:
        raise MissingCredentialError(library_id, visible_key_names(environ))

    return update_video_chapters(library_id, video_id, chapters, resolved.api_key)


def upload_chapter_text(
    video_id: Optional[str],
    library_name: Optional[str],
    library_id: Optional[str],
    chapter_text: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
) -> UploadResult:
    """
    Validate edited chapter text and upload it to a video.

    Checks run in the same order the upload form reported them.

    Args:
        video_id: Video GUID
        library_name: Selected library name
        library_id: Manually entered library ID (ignored for libraries with a fixed ID)
        chapter_text: Chapter CSV or JSON
        environ: Environment to resolve keys from

    Returns:
        UploadResult with the parsed chapters and Bunny.net response

    Raises:
        ChapterValidationError: Missing input or no usable chapters
    """
    if not video_id or not video_id.strip():
        raise ChapterValidationError("Please enter the Video GUID.")

    if not library_name:
        raise ChapterValidationError("Please select a Library.")

    resolved_library_id = resolve_library_id(library_name, library_id)
    if not resolved_library_id:
        raise ChapterValidationError(
            "Library ID is missing. Please select a library with a valid ID or enter it manually."
        )

    if not chapter_text or not chapter_text.strip():
        raise ChapterValidationError("No chapter data to upload.")

    video_id = video_id.strip()
    logger.info(
        "[BunnyService] Initiating update for Lib: %s, Video: %s",
        resolved_library_id,
        video_id,
    )

    chapters = parse_chapter_input(chapter_text)
    if not chapters:
        raise ChapterValidationError(
            "No valid chapters found in the data. Please check the CSV format."
        )

    response = relay_chapters(resolved_library_id, video_id, chapters, environ)

    return UploadResult(
        library_id=resolved_library_id,
        video_id=video_id,
        chapters=chapters,
        response=response,
    )
