"""
Read and validate uploaded transcript files (.vtt, .srt, .txt).
"""

from dataclasses import dataclass
from pathlib import Path

from app.errors import InvalidTranscriptError


ALLOWED_EXTENSIONS = (".vtt", ".srt", ".txt")


@dataclass
class TranscriptFile:
    """A transcript file with its decoded text."""
    filename: str
    content: str


def validate_transcript_filename(filename: str) -> None:
    """
    Check that a filename has a supported transcript extension.

    Raises:
        InvalidTranscriptError: If the extension is not .vtt, .srt or .txt
    """
    if not filename or not filename.endswith(ALLOWED_EXTENSIONS):
        raise InvalidTranscriptError(
            "Please upload a valid transcript file (.vtt, .srt, or .txt)"
        )


def decode_transcript(filename: str, raw: bytes) -> TranscriptFile:
    """
    Validate a transcript upload and decode it as UTF-8.

    Args:
        filename: Original name of the uploaded file
        raw: File bytes

    Returns:
        TranscriptFile with the decoded text

    Raises:
        InvalidTranscriptError: Bad extension or undecodable content
    """
    validate_transcript_filename(filename)

    try:
        # utf-8-sig drops the BOM some caption editors write
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise InvalidTranscriptError("Failed to read file contents.")

    return TranscriptFile(filename=filename, content=content)


def read_transcript_file(path: str) -> TranscriptFile:
    """
    Read a transcript from disk.

    Args:
        path: Path to a .vtt, .srt or .txt file

    Returns:
        TranscriptFile named after the file's basename
    """
    file_path = Path(path)
    validate_transcript_filename(file_path.name)

    try:
        raw = file_path.read_bytes()
    except OSError:
        raise InvalidTranscriptError("Failed to read file contents.")

    return decode_transcript(file_path.name, raw)


def build_output_filename(source_name: str, suffix: str, extension: str) -> str:
    """
    Name a download after its source transcript.

    The stem is everything before the first dot, so "talk.part1.vtt"
    with suffix "chapters" becomes "talk_chapters.csv".
    """
    stem = source_name.split(".")[0]
    return f"{stem}_{suffix}.{extension}"
