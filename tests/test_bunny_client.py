"""
Tests for the Bunny.net client and upload flow.
"""

from unittest.mock import patch

import pytest
import requests

from app.errors import (
    BunnyUpstreamError,
    BunnyTimeoutError,
    BunnyConnectionError,
    ChapterValidationError,
    MissingCredentialError,
)
from app.schemas import BunnyChapter
from app.bunny.client import build_video_url, update_video_chapters
from app.bunny.upload import relay_chapters, upload_chapter_text

from tests.conftest import bunny_response


CHAPTERS = [BunnyChapter(start=0, end=59, title="Intro")]


class TestUpdateVideoChapters:
    """Direct Stream API calls"""

    def test_url(self):
        assert build_video_url("1", "abc", base_url="https://example.test/") == (
            "https://example.test/library/1/videos/abc"
        )

    @patch("app.bunny.client.requests.post")
    def test_request_shape(self, mock_post):
        mock_post.return_value = bunny_response(200, '{"success": true, "statusCode": 200}')

        result = update_video_chapters("239218", "guid-1", CHAPTERS, "lib-key", timeout=5)

        assert result == {"success": True, "data": {"success": True, "statusCode": 200}}
        args, kwargs = mock_post.call_args
        assert args[0].endswith("/library/239218/videos/guid-1")
        assert kwargs["headers"]["AccessKey"] == "lib-key"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["headers"]["Accept"] == "application/json"
        assert kwargs["json"] == {"chapters": [{"title": "Intro", "start": 0, "end": 59}]}
        assert kwargs["timeout"] == 5

    @patch("app.bunny.client.requests.post")
    def test_raw_payload_forwarded(self, mock_post):
        mock_post.return_value = bunny_response()
        update_video_chapters("1", "v", [{"anything": "goes"}], "k")
        assert mock_post.call_args.kwargs["json"] == {"chapters": [{"anything": "goes"}]}

    @patch("app.bunny.client.requests.post")
    def test_non_json_success(self, mock_post):
        mock_post.return_value = bunny_response(200, "OK", json_error=True)
        result = update_video_chapters("1", "v", CHAPTERS, "k")
        assert result == {
            "success": True,
            "message": "Updated, but response was not JSON",
            "raw": "OK",
        }

    @patch("app.bunny.client.requests.post")
    def test_upstream_error(self, mock_post):
        mock_post.return_value = bunny_response(401, '{"Message": "Unauthorized"}')
        with pytest.raises(BunnyUpstreamError) as exc_info:
            update_video_chapters("1", "v", CHAPTERS, "bad-key")
        assert exc_info.value.status_code == 401
        assert exc_info.value.to_dict() == {
            "error": "Bunny.net Refused (Status 401)",
            "details": '{"Message": "Unauthorized"}',
        }

    @patch("app.bunny.client.requests.post")
    def test_redirect_is_not_success(self, mock_post):
        mock_post.return_value = bunny_response(302, "")
        with pytest.raises(BunnyUpstreamError):
            update_video_chapters("1", "v", CHAPTERS, "k")

    @patch("app.bunny.client.requests.post")
    def test_timeout(self, mock_post):
        mock_post.side_effect = requests.exceptions.Timeout()
        with pytest.raises(BunnyTimeoutError, match="timed out after 15 seconds"):
            update_video_chapters("1", "v", CHAPTERS, "k", timeout=15)

    @patch("app.bunny.client.requests.post")
    def test_connection_failure(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("Name or service not known")
        with pytest.raises(BunnyConnectionError) as exc_info:
            update_video_chapters("1", "v", CHAPTERS, "k")
        assert exc_info.value.status_code == 500
        assert exc_info.value.to_dict() == {
            "error": "Internal Server Error: Name or service not known",
        }


class TestRelayChapters:
    """Key resolution in front of the client"""

    @patch("app.bunny.upload.update_video_chapters")
    def test_uses_resolved_key(self, mock_update):
        mock_update.return_value = {"success": True, "data": {}}
        relay_chapters("42", "v", CHAPTERS, {"BUNNY_API_KEY": "global"})
        mock_update.assert_called_once_with("42", "v", CHAPTERS, "global")

    def test_missing_key(self):
        with pytest.raises(MissingCredentialError) as exc_info:
            relay_chapters("42", "v", CHAPTERS, {"BUNNY_KEY_7": "x"})
        body = exc_info.value.to_dict()
        assert body["error"] == "Server Error: No API Key found for Library ID 42."
        assert body["details"] == (
            "Checked for BUNNY_KEY_42 or variables containing '42' or BUNNY_API_KEY."
        )
        assert body["availableEnvVars"] == "BUNNY_KEY_7"
        assert exc_info.value.status_code == 500


class TestUploadChapterText:
    """Form-style validation before upload"""

    ENV = {"BUNNY_KEY_239218": "lib-key"}

    @pytest.mark.parametrize("kwargs, message", [
        (dict(video_id="  ", library_name="InfiniteLMS", library_id="", chapter_text="0,1,a"),
         "Please enter the Video GUID."),
        (dict(video_id="v", library_name="", library_id="1", chapter_text="0,1,a"),
         "Please select a Library."),
        (dict(video_id="v", library_name="WDNTV", library_id=" ", chapter_text="0,1,a"),
         "Library ID is missing."),
        (dict(video_id="v", library_name="InfiniteLMS", library_id="", chapter_text="  "),
         "No chapter data to upload."),
        (dict(video_id="v", library_name="InfiniteLMS", library_id="", chapter_text="garbage"),
         "No valid chapters found in the data."),
    ])
    def test_validation(self, kwargs, message):
        with pytest.raises(ChapterValidationError) as exc_info:
            upload_chapter_text(environ=self.ENV, **kwargs)
        assert exc_info.value.message.startswith(message)
        assert exc_info.value.status_code == 400

    @patch("app.bunny.client.requests.post")
    def test_success(self, mock_post):
        mock_post.return_value = bunny_response()
        result = upload_chapter_text(
            video_id=" guid-1 ",
            library_name="InfiniteLMS",
            library_id="ignored",
            chapter_text="0,59,Intro\n60,120,Next",
            environ=self.ENV,
        )

        assert result.library_id == "239218"
        assert result.video_id == "guid-1"
        assert [c.title for c in result.chapters] == ["Intro", "Next"]
        assert mock_post.call_args.kwargs["headers"]["AccessKey"] == "lib-key"
        assert mock_post.call_args.args[0].endswith("/library/239218/videos/guid-1")
