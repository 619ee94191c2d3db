"""
Bunny.net endpoints: library catalogue and chapter upload.
"""

import logging
from typing import Mapping

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_environ
from app.errors import ProcessorError
from app.schemas import BunnyLibraryOut, ChapterUploadRequest, ChapterUploadResponse, ErrorResponse
from app.bunny.chapters import chapters_to_csv
from app.bunny.libraries import BUNNY_LIBRARIES, env_var_hint
from app.bunny.upload import upload_chapter_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/bunny", tags=["bunny"])


@router.get("/libraries", response_model=list[BunnyLibraryOut])
def list_libraries():
    """
    List the known Bunny.net libraries.

    Libraries without a fixed ID need `library_id` entered manually
    when uploading.
    """
    return [
        BunnyLibraryOut(
            name=library.name,
            id=library.id,
            has_fixed_id=library.has_fixed_id,
            env_var_hint=env_var_hint(library.id),
        )
        for library in BUNNY_LIBRARIES
    ]


@router.post(
    "/chapters",
    response_model=ChapterUploadResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Incomplete request or no valid chapters"},
        500: {"model": ErrorResponse, "description": "No API key or relay failure"},
        504: {"model": ErrorResponse, "description": "Bunny.net timed out"},
    },
)
def upload_chapters(
    request: ChapterUploadRequest,
    environ: Mapping[str, str] = Depends(get_environ),
):
    """
    Add or update the chapters of a Bunny.net video.

    - **video_id**: Video GUID
    - **library_name**: Library from /v1/bunny/libraries
    - **library_id**: Required when the library has no fixed ID
    - **chapter_text**: Simple CSV (`start,end,title` per line) or JSON

    The API key is resolved on the server from BUNNY_KEY_* / BUNNY_API_KEY.
    """
    try:
        result = upload_chapter_text(
            video_id=request.video_id,
            library_name=request.library_name,
            library_id=request.library_id,
            chapter_text=request.chapter_text,
            environ=environ,
        )
    except ProcessorError as e:
        detail = e.message
        if e.details.get("availableEnvVars"):
            detail += f"\n[DEBUG] Server sees these keys: {e.details['availableEnvVars']}"
        if e.details.get("details"):
            detail += f"\n[DETAILS] {e.details['details']}"
        raise HTTPException(status_code=e.status_code, detail=detail)
    except Exception as e:
        logger.exception("[API] Critical Server Error")
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {e}")

    return ChapterUploadResponse(
        success=True,
        library_id=result.library_id,
        video_id=result.video_id,
        chapters=result.chapters,
        csv_content=chapters_to_csv(result.chapters),
        data=result.response.get("data"),
        message=result.response.get("message"),
        raw=result.response.get("raw"),
    )
