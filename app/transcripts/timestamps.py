"""
Timestamp helpers for transcripts and model output.
"""

import re
from typing import Optional


# 00:00:00, optionally followed by .000
TIMESTAMP_PATTERN = re.compile(r"(\d{2}:\d{2}:\d{2})")
MILLISECONDS_PATTERN = re.compile(r"(\d{2}:\d{2}:\d{2})\.\d{1,3}")


def get_last_timestamp(text: str) -> Optional[str]:
    """
    Find the final HH:MM:SS timestamp in a transcript.

    The chapter prompt uses it to tell the model where the video ends,
    so the last chapter reaches the end of the recording.

    Args:
        text: Transcript text (VTT, SRT or plain)

    Returns:
        Last timestamp without milliseconds, or None if there is none
    """
    matches = TIMESTAMP_PATTERN.findall(text or "")
    if matches:
        return matches[-1]
    return None


def strip_milliseconds(text: str) -> str:
    """Rewrite every HH:MM:SS.mmm as HH:MM:SS."""
    return MILLISECONDS_PATTERN.sub(r"\1", text)


def seconds_to_time_str(seconds: int) -> str:
    """
    Convert seconds to a zero-padded HH:MM:SS string.

    Args:
        seconds: Total seconds (negative values get a leading "-")

    Returns:
        Time string such as "01:02:03" or "-00:00:05"
    """
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
