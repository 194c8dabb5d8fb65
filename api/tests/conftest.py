import json
import os
import sys

import pytest
import requests

# Ensure api/ is on sys.path so imports like "services.*" work in tests.
API_DIR = os.path.dirname(os.path.dirname(__file__))
if API_DIR not in sys.path:
    sys.path.insert(0, API_DIR)

from config import ElevenLabsSettings  # noqa: E402


def fake_response(status: int, body=None, raw: bytes = None, url: str = "https://api.elevenlabs.io/v1/voices"):
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    if raw is not None:
        resp._content = raw
    else:
        resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return resp


@pytest.fixture
def settings():
    return ElevenLabsSettings(api_key=None, api_host=None, voice_id=None)


@pytest.fixture
def keyed_settings():
    return ElevenLabsSettings(api_key="env-key", api_host=None, voice_id=None)
