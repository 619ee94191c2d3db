"""
Shared fixtures: a fake Gemini client and an API test client.
"""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.dependencies import get_gemini_client, get_environ


SAMPLE_VTT = """WEBVTT

00:00:01.000 --> 00:00:04.500
Welcome everyone to the session.

00:12:30.250 --> 00:12:35.000
Let's talk about pricing.

01:02:03.400 --> 01:02:07.000
Thanks for joining, see you next week.
"""

CHAPTER_RESPONSE = """00:00:01.000 – Welcome and Introductions
00:12:30 – Pricing Strategy
---PART_SEPARATOR---
```csv
1,750,Welcome and Introductions
750,3727,Pricing Strategy
```"""


def make_gemini_client(text=None, errors=None):
    """
    Build a fake genai.Client.

    Args:
        text: Response text (or dict of model -> text)
        errors: Dict of model -> exception to raise
    """
    errors = errors or {}

    def generate_content(model, contents, config):
        if model in errors:
            raise errors[model]
        value = text.get(model) if isinstance(text, dict) else text
        return SimpleNamespace(text=value)

    client = MagicMock()
    client.models.generate_content.side_effect = generate_content
    return client


@pytest.fixture
def gemini_client():
    return make_gemini_client(CHAPTER_RESPONSE)


@pytest.fixture
def environ():
    return {"BUNNY_KEY_239218": "lib-key", "PATH": "/usr/bin"}


@pytest.fixture
def api_client(gemini_client, environ):
    app.dependency_overrides[get_gemini_client] = lambda: gemini_client
    app.dependency_overrides[get_environ] = lambda: environ
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def bunny_response(status_code=200, text='{"success": true}', json_error=False):
    """Fake requests.Response for Bunny.net."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.side_effect = lambda: json.loads(text)
    return response
