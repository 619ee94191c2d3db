# Gemini transcript processing
from app.llm.gemini import (
    ChapterResult,
    CaptionResult,
    generate_chapters,
    clean_captions,
    get_client,
)

__all__ = [
    "ChapterResult",
    "CaptionResult",
    "generate_chapters",
    "clean_captions",
    "get_client",
]
