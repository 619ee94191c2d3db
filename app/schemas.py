"""
Pydantic schemas for API request/response models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


# --- Chapter Schemas ---

class BunnyChapter(BaseModel):
    """One labelled segment of a video, in seconds."""
    title: str
    start: int
    end: int


# --- Transcript Processing Schemas ---

class ChapterResultOut(BaseModel):
    """Chapters generated from a transcript."""
    filename: str
    csv_filename: str
    human_readable: str
    csv_content: str


class CaptionResultOut(BaseModel):
    """Cleaned captions generated from a transcript."""
    filename: str
    srt_filename: str
    srt_content: str


# --- Bunny.net Schemas ---

class BunnyLibraryOut(BaseModel):
    """A selectable Bunny.net library."""
    name: str
    id: str = ""
    has_fixed_id: bool = False
    env_var_hint: Optional[str] = None


class ChapterUploadRequest(BaseModel):
    """Edited chapter data to push to a Bunny.net video."""
    video_id: str = ""
    library_name: str = ""
    library_id: str = ""
    chapter_text: str = Field(default="", description="Simple CSV (start,end,title) or JSON chapters")


class ChapterUploadResponse(BaseModel):
    """Result of a chapter upload."""
    success: bool
    library_id: str
    video_id: str
    chapters: list[BunnyChapter] = Field(default_factory=list)
    csv_content: str = ""
    data: Optional[Any] = None
    message: Optional[str] = None
    raw: Optional[str] = None


# --- Generic Schemas ---

class ErrorResponse(BaseModel):
    """Error response."""
    detail: str
