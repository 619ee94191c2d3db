# Transcript file handling
from app.transcripts.files import (
    TranscriptFile,
    decode_transcript,
    read_transcript_file,
    build_output_filename,
)
from app.transcripts.timestamps import get_last_timestamp, strip_milliseconds

__all__ = [
    "TranscriptFile",
    "decode_transcript",
    "read_transcript_file",
    "build_output_filename",
    "get_last_timestamp",
    "strip_milliseconds",
]
