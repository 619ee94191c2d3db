# Bunny.net chapter upload modules
from app.bunny.chapters import parse_csv_to_chapters, parse_chapter_input, chapters_to_csv
from app.bunny.credentials import resolve_api_key, ResolvedKey
from app.bunny.libraries import BUNNY_LIBRARIES, find_library, resolve_library_id
from app.bunny.client import update_video_chapters
from app.bunny.upload import relay_chapters, upload_chapter_text, UploadResult

__all__ = [
    "parse_csv_to_chapters",
    "parse_chapter_input",
    "chapters_to_csv",
    "resolve_api_key",
    "ResolvedKey",
    "BUNNY_LIBRARIES",
    "find_library",
    "resolve_library_id",
    "update_video_chapters",
    "relay_chapters",
    "upload_chapter_text",
    "UploadResult",
]
