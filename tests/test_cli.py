"""
Tests for the transcript CLI.
"""

import sys
from unittest.mock import patch

import pytest

from app.cli import process_transcript as cli
from app.llm.gemini import ChapterResult, CaptionResult

from tests.conftest import SAMPLE_VTT, bunny_response


def run_cli(*argv):
    with patch.object(sys, "argv", ["process_transcript", *argv]):
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
    return exc_info.value.code


class TestCli:
    """Subcommands"""

    @patch("app.cli.process_transcript.generate_chapters")
    def test_chapters_writes_csv(self, mock_generate, tmp_path, capsys):
        mock_generate.return_value = ChapterResult(
            human_readable="00:00:01 – Intro",
            csv_content="1,60,Intro",
        )
        source = tmp_path / "session.vtt"
        source.write_text(SAMPLE_VTT, encoding="utf-8")

        code = run_cli("chapters", str(source), "--out-dir", str(tmp_path / "out"))

        assert code == 0
        assert (tmp_path / "out" / "session_chapters.csv").read_text(encoding="utf-8") == "1,60,Intro"
        assert "00:00:01 – Intro" in capsys.readouterr().out

    @patch("app.cli.process_transcript.clean_captions")
    def test_captions_writes_srt(self, mock_clean, tmp_path):
        mock_clean.return_value = CaptionResult(srt_content="1\nHi")
        source = tmp_path / "talk.srt"
        source.write_text("1\nuh hi", encoding="utf-8")

        assert run_cli("captions", str(source), "-o", str(tmp_path)) == 0
        assert (tmp_path / "talk_cleaned_cc.srt").read_text(encoding="utf-8") == "1\nHi"

    def test_bad_transcript_extension(self, tmp_path, capsys):
        source = tmp_path / "video.mp4"
        source.write_bytes(b"")
        assert run_cli("chapters", str(source)) == 1
        assert "valid transcript file" in capsys.readouterr().out

    @patch.dict("os.environ", {"BUNNY_KEY_555": "cli-key"})
    @patch("app.bunny.client.requests.post")
    def test_upload_with_library_id(self, mock_post, tmp_path, capsys):
        mock_post.return_value = bunny_response()
        chapters = tmp_path / "chapters.csv"
        chapters.write_text("0,59,Intro\n60,3727,Wrap-up", encoding="utf-8")

        code = run_cli("upload", "--library-id", "555", "--video-id", "guid-1", "--csv", str(chapters))

        assert code == 0
        assert mock_post.call_args.kwargs["headers"]["AccessKey"] == "cli-key"
        out = capsys.readouterr().out
        assert "Updated 2 chapters" in out
        assert "00:01:00 - 01:02:07  Wrap-up" in out

    def test_no_command(self, capsys):
        assert run_cli() == 1

    @patch("app.llm.gemini.get_client")
    def test_missing_gemini_key(self, mock_get_client, tmp_path, capsys):
        mock_get_client.side_effect = ValueError("Missing key inputs argument!")
        source = tmp_path / "session.vtt"
        source.write_text(SAMPLE_VTT, encoding="utf-8")

        assert run_cli("chapters", str(source), "-o", str(tmp_path)) == 1
        assert "✗ Error: Missing key inputs argument!" in capsys.readouterr().out
        assert not (tmp_path / "session_chapters.csv").exists()

    def test_undecodable_chapter_file(self, tmp_path, capsys):
        chapters = tmp_path / "chapters.csv"
        chapters.write_bytes(b"\xff\xfe\x00bad")

        code = run_cli("upload", "--library", "InfiniteLMS", "--video-id", "g", "--csv", str(chapters))

        assert code == 1
        assert "✗ Error: Failed to read file contents." in capsys.readouterr().out
