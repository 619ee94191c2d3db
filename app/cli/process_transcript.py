#!/usr/bin/env python3
"""
Process transcripts and push chapters to Bunny.net from the command line.

Usage:
    python -m app.cli.process_transcript chapters talk.vtt               # Write talk_chapters.csv
    python -m app.cli.process_transcript captions talk.srt --out-dir out # Write out/talk_cleaned_cc.srt
    python -m app.cli.process_transcript upload --library InfiniteLMS --video-id GUID --csv talk_chapters.csv
    python -m app.cli.process_transcript upload --library-id 123456 --video-id GUID --csv chapters.json
    python -m app.cli.process_transcript --check-config                 # Show which keys are set
"""

import argparse
import os
import sys
from pathlib import Path

from app.settings import get_settings
from app.errors import ProcessorError, ChapterValidationError
from app.transcripts.files import read_transcript_file, build_output_filename
from app.transcripts.timestamps import seconds_to_time_str
from app.llm.gemini import generate_chapters, clean_captions
from app.bunny.credentials import visible_key_names
from app.bunny.upload import upload_chapter_text


def write_output(out_dir: str, filename: str, content: str) -> Path:
    """
    Write a result file, creating the output directory if needed.

    Returns:
        Path of the written file
    """
    path = Path(out_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def run_chapters(file: str, out_dir: str) -> int:
    """Generate chapters for a transcript and save the CSV."""
    transcript = read_transcript_file(file)
    print(f"Generating chapters for {transcript.filename}...")

    result = generate_chapters(transcript.content)

    print()
    print(result.human_readable)
    print()

    path = write_output(
        out_dir,
        build_output_filename(transcript.filename, "chapters", "csv"),
        result.csv_content,
    )
    print(f"✓ Saved chapters to '{path}'")
    return 0


def run_captions(file: str, out_dir: str) -> int:
    """Clean a caption file and save the SRT."""
    transcript = read_transcript_file(file)
    print(f"Cleaning captions for {transcript.filename}...")

    result = clean_captions(transcript.content)

    path = write_output(
        out_dir,
        build_output_filename(transcript.filename, "cleaned_cc", "srt"),
        result.srt_content,
    )
    print(f"✓ Saved captions to '{path}'")
    return 0


def run_upload(library: str, library_id: str, video_id: str, csv_file: str) -> int:
    """Upload a chapter file to a Bunny.net video."""
    try:
        chapter_text = Path(csv_file).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ChapterValidationError("Failed to read file contents.") from e

    # A bare --library-id stands in for the library selection
    library_name = library or library_id

    result = upload_chapter_text(
        video_id=video_id,
        library_name=library_name,
        library_id=library_id,
        chapter_text=chapter_text,
    )

    print(f"✓ Updated {len(result.chapters)} chapters on video {result.video_id} "
          f"(library {result.library_id})")
    for chapter in result.chapters:
        print(f"  {seconds_to_time_str(chapter.start)} - {seconds_to_time_str(chapter.end)}  {chapter.title}")

    if result.response.get("message"):
        print(f"  Note: {result.response['message']}")
    return 0


def check_config() -> int:
    """Print which credentials are configured, without their values."""
    settings = get_settings()
    missing = settings.validate()

    print(f"  GEMINI_API_KEY: {'set' if settings.GEMINI_API_KEY else 'not set'}")
    print(f"  CHAPTER_MODEL: {settings.CHAPTER_MODEL}")
    print(f"  CAPTION_MODEL: {settings.CAPTION_MODEL} (fallback {settings.CAPTION_FALLBACK_MODEL})")
    print(f"  BUNNY_API_BASE_URL: {settings.BUNNY_API_BASE_URL}")
    print(f"  Bunny keys visible: {visible_key_names(os.environ)}")

    if missing:
        print("Configuration errors:")
        for key in missing:
            print(f"  Missing: {key}")
        return 1

    print("Configuration OK!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate chapters/captions from transcripts and upload chapters to Bunny.net."
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Just check configuration and exit"
    )

    subparsers = parser.add_subparsers(dest="command")

    chapters = subparsers.add_parser("chapters", help="Generate chapters from a transcript")
    chapters.add_argument("file", help="Transcript file (.vtt, .srt or .txt)")
    chapters.add_argument(
        "--out-dir", "-o",
        default=".",
        help="Directory for the CSV (default: current directory)"
    )

    captions = subparsers.add_parser("captions", help="Clean a caption file into SRT")
    captions.add_argument("file", help="Caption file (.vtt, .srt or .txt)")
    captions.add_argument(
        "--out-dir", "-o",
        default=".",
        help="Directory for the SRT (default: current directory)"
    )

    upload = subparsers.add_parser("upload", help="Upload chapters to a Bunny.net video")
    upload.add_argument("--library", default="", help="Library name (see app.bunny.libraries)")
    upload.add_argument("--library-id", default="", help="Library ID, for libraries without a fixed ID")
    upload.add_argument("--video-id", required=True, help="Video GUID")
    upload.add_argument("--csv", required=True, help="Chapter file: start,end,title lines or JSON")

    return parser


def main():
    """Main entry point for the transcript CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.check_config:
        sys.exit(check_config())

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "chapters":
            code = run_chapters(args.file, args.out_dir)
        elif args.command == "captions":
            code = run_captions(args.file, args.out_dir)
        else:
            code = run_upload(args.library, args.library_id, args.video_id, args.csv)
        sys.exit(code)

    except ProcessorError as e:
        print(f"✗ Error: {e.message}")
        for key, value in e.details.items():
            print(f"  {key}: {value}")
        sys.exit(1)
    except OSError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
