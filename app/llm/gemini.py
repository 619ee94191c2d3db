"""
Chapter generation and caption cleanup using Gemini.
"""

import os
import re
import logging
from dataclasses import dataclass
from typing import Any, Optional

from app.settings import get_settings
from app.errors import ChapterGenerationError, CaptionCleanupError
from app.llm.prompts import PART_SEPARATOR, CAPTIONS_SYSTEM_PROMPT, chapters_system_prompt
from app.transcripts.timestamps import get_last_timestamp, strip_milliseconds


logger = logging.getLogger(__name__)

PART_TWO_HEADING = re.compile(r"PART 2.*Bunny Chapters", re.IGNORECASE)
SRT_FENCE_OPEN = re.compile(r"\A```srt\s*", re.IGNORECASE)
FENCE_OPEN = re.compile(r"\A```\s*")
FENCE_CLOSE = re.compile(r"```\Z")


@dataclass
class ChapterResult:
    """Chapter output: topic list for people, CSV for Bunny.net."""
    human_readable: str
    csv_content: str


@dataclass
class CaptionResult:
    """Cleaned caption file in SRT format."""
    srt_content: str


def get_client(api_key: Optional[str] = None):
    """
    Create a Gemini client.

    A missing key is logged and passed through so the SDK raises
    its own error on first use.
    """
    from google import genai

    settings = get_settings()
    api_key = api_key if api_key is not None else settings.GEMINI_API_KEY

    if not api_key:
        logger.error("Gemini API key is missing. Checked GEMINI_API_KEY, API_KEY and VITE_API_KEY.")

    # Suppress "Both GOOGLE_API_KEY and GEMINI_API_KEY are set" warning
    # by temporarily clearing GOOGLE_API_KEY for this client
    original_google_key = os.environ.get('GOOGLE_API_KEY')
    if original_google_key:
        del os.environ['GOOGLE_API_KEY']

    try:
        return genai.Client(api_key=api_key)
    finally:
        if original_google_key:
            os.environ['GOOGLE_API_KEY'] = original_google_key


def split_chapter_response(full_text: str) -> ChapterResult:
    """
    Split a chapter response into its human-readable and CSV parts.

    The model is asked for PART_SEPARATOR between the parts; when it
    omits it, a "PART 2 ... Bunny Chapters" heading is used instead.

    Args:
        full_text: Raw model output

    Returns:
        ChapterResult with milliseconds removed from the topic list
        and markdown fences removed from the CSV
    """
    parts = full_text.split(PART_SEPARATOR)

    if len(parts) < 2:
        heading_split = PART_TWO_HEADING.split(full_text)
        if len(heading_split) >= 2:
            parts = heading_split

    human_readable = parts[0].strip() if parts[0] else "Error parsing Human Readable section."
    csv_content = parts[1].strip() if len(parts) > 1 and parts[1] else ""

    if not csv_content and "00:" not in human_readable:
        human_readable = "The model response format was unexpected:\n" + full_text

    human_readable = strip_milliseconds(human_readable)
    csv_content = csv_content.replace("```csv", "").replace("```", "").strip()

    return ChapterResult(human_readable=human_readable, csv_content=csv_content)


def strip_srt_fences(srt_content: str) -> str:
    """Remove markdown code fences the model sometimes wraps SRT output in."""
    srt_content = SRT_FENCE_OPEN.sub("", srt_content, count=1)
    srt_content = FENCE_OPEN.sub("", srt_content, count=1)
    srt_content = FENCE_CLOSE.sub("", srt_content, count=1)
    return srt_content.strip()


def generate_chapters(transcript_text: str, client: Any = None) -> ChapterResult:
    """
    Generate chapter markers for a transcript.

    Args:
        transcript_text: Full transcript (VTT, SRT or plain text)
        client: Gemini client (created from settings if None)

    Returns:
        ChapterResult with the topic list and Bunny.net CSV

    Raises:
        ChapterGenerationError: If no client can be created or the Gemini call fails
    """
    settings = get_settings()

    # Ground the model to the end of the video
    last_time = get_last_timestamp(transcript_text) or "the end of the file"

    try:
        client = client or get_client()
        response = client.models.generate_content(
            model=settings.CHAPTER_MODEL,
            contents=transcript_text,
            config={
                "system_instruction": chapters_system_prompt(last_time),
                "temperature": settings.CHAPTER_TEMPERATURE,
            },
        )
    except Exception as e:
        logger.error("Chapter Generation Error: %s", e)
        raise ChapterGenerationError(str(e) or "Error generating chapters.") from e

    return split_chapter_response(response.text or "")


def _generate_captions(client: Any, model: str, transcript_text: str) -> str:
    settings = get_settings()
    response = client.models.generate_content(
        model=model,
        contents=transcript_text,
        config={
            "system_instruction": CAPTIONS_SYSTEM_PROMPT,
            "temperature": settings.CAPTION_TEMPERATURE,
            "max_output_tokens": settings.CAPTION_MAX_OUTPUT_TOKENS,
        },
    )
    return response.text or ""


def clean_captions(transcript_text: str, client: Any = None) -> CaptionResult:
    """
    Reformat a caption file into clean, readable SRT.

    Tries the primary model first and falls back to the faster model
    once if the primary call raises.

    Args:
        transcript_text: Caption file contents (.srt or .vtt)
        client: Gemini client (created from settings if None)

    Returns:
        CaptionResult with the cleaned SRT

    Raises:
        CaptionCleanupError: If both models fail or the output is empty
    """
    settings = get_settings()

    try:
        client = client or get_client()
    except Exception as e:
        logger.error("[Caption] Could not create Gemini client. %s", e)
        raise CaptionCleanupError(str(e) or "Gemini client could not be created.") from e

    primary = settings.CAPTION_MODEL
    fallback = settings.CAPTION_FALLBACK_MODEL

    try:
        logger.info("[Caption] Attempting with %s...", primary)
        srt_content = _generate_captions(client, primary, transcript_text)
    except Exception as e:
        logger.warning("[Caption] %s failed. Falling back to %s. %s", primary, fallback, e)
        try:
            srt_content = _generate_captions(client, fallback, transcript_text)
        except Exception as fallback_error:
            logger.error("[Caption] Fallback (%s) also failed. %s", fallback, fallback_error)
            raise CaptionCleanupError(
                "Failed to generate captions. Both Pro and Flash models encountered errors. "
                "Please check the file length."
            ) from fallback_error

    if not srt_content:
        raise CaptionCleanupError(
            "AI returned empty content. This usually means the file was too long "
            "or the model timed out."
        )

    return CaptionResult(srt_content=strip_srt_fences(srt_content))
