"""
Parse edited chapter text into Bunny.net chapter objects.
"""

import re
import json
from typing import Optional

from pydantic import ValidationError

from app.schemas import BunnyChapter


# Leading ASCII integer, the way JavaScript's parseInt(value, 10) reads it
_LEADING_INT = re.compile(r"^[+-]?[0-9]+")


def parse_int_prefix(value: str) -> Optional[int]:
    """
    Read the leading integer of a string.

    "12" -> 12, "12s" -> 12, "1.9" -> 1, "abc" -> None
    """
    match = _LEADING_INT.match(value.strip())
    if not match:
        return None
    return int(match.group(0))


def parse_csv_to_chapters(csv_content: str) -> list[BunnyChapter]:
    """
    Parse "start,end,title" lines into chapters.

    Titles may contain commas; everything after the second comma is
    the title. Lines without a usable start, end and title are skipped.
    Order is kept as written.

    Args:
        csv_content: One chapter per line, e.g. "0,59,Introduction"

    Returns:
        List of BunnyChapter
    """
    chapters = []

    for line in csv_content.split('\n'):
        if not line.strip():
            continue

        parts = line.split(',')
        if len(parts) < 3:
            continue

        start = parse_int_prefix(parts[0])
        end = parse_int_prefix(parts[1])
        title = ','.join(parts[2:]).strip()

        if start is None or end is None or not title:
            continue

        chapters.append(BunnyChapter(start=start, end=end, title=title))

    return chapters


def _parse_json_chapters(data) -> list[BunnyChapter]:
    if isinstance(data, dict):
        data = data.get("chapters", [])
    if not isinstance(data, list):
        return []

    chapters = []
    for item in data:
        try:
            chapter = BunnyChapter.model_validate(item)
        except ValidationError:
            continue
        if chapter.title.strip():
            chapters.append(chapter)
    return chapters


def parse_chapter_input(text: str) -> list[BunnyChapter]:
    """
    Parse chapter text in either simple CSV format or JSON.

    JSON may be a list of {start, end, title} objects or the full
    Bunny.net payload {"chapters": [...]}.

    Args:
        text: Chapter data as edited by the user

    Returns:
        List of BunnyChapter (empty if nothing usable was found)
    """
    stripped = (text or "").strip()

    if stripped.startswith(("[", "{")):
        try:
            return _parse_json_chapters(json.loads(stripped))
        except json.JSONDecodeError:
            pass

    return parse_csv_to_chapters(text or "")


def chapters_to_csv(chapters: list[BunnyChapter]) -> str:
    """Format chapters back into "start,end,title" lines."""
    return "\n".join(f"{c.start},{c.end},{c.title}" for c in chapters)
