"""
Transcript processing endpoints: chapter generation and caption cleanup.
"""

from typing import Any

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.dependencies import get_gemini_client
from app.errors import ProcessorError
from app.schemas import ChapterResultOut, CaptionResultOut, ErrorResponse
from app.transcripts.files import decode_transcript, build_output_filename
from app.llm.gemini import generate_chapters, clean_captions

router = APIRouter(prefix="/v1", tags=["processing"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Not a transcript file or unreadable"},
    502: {"model": ErrorResponse, "description": "Gemini failed"},
}


def _read_upload(file: UploadFile):
    try:
        return decode_transcript(file.filename or "", file.file.read())
    except ProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/chapters", response_model=ChapterResultOut, responses=ERROR_RESPONSES)
def create_chapters(
    file: UploadFile = File(..., description="Transcript (.vtt, .srt or .txt)"),
    client: Any = Depends(get_gemini_client),
):
    """
    Generate chapter markers from a transcript.

    Returns the human-readable topic list and the Bunny.net CSV
    (start_seconds,end_seconds,title), plus the suggested download name.
    """
    transcript = _read_upload(file)

    try:
        result = generate_chapters(transcript.content, client=client)
    except ProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return ChapterResultOut(
        filename=transcript.filename,
        csv_filename=build_output_filename(transcript.filename, "chapters", "csv"),
        human_readable=result.human_readable,
        csv_content=result.csv_content,
    )


@router.post("/captions", response_model=CaptionResultOut, responses=ERROR_RESPONSES)
def create_captions(
    file: UploadFile = File(..., description="Caption file (.vtt, .srt or .txt)"),
    client: Any = Depends(get_gemini_client),
):
    """
    Clean a caption file into readable SRT.

    Removes filler words and speaker labels, fixes line breaks
    and punctuation.
    """
    transcript = _read_upload(file)

    try:
        result = clean_captions(transcript.content, client=client)
    except ProcessorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return CaptionResultOut(
        filename=transcript.filename,
        srt_filename=build_output_filename(transcript.filename, "cleaned_cc", "srt"),
        srt_content=result.srt_content,
    )
