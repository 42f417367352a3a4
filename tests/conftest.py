import json

import httpx
import pytest

from config import Settings
from services.llm import GeminiClient

API_URL = "https://llm.test/v1beta/models/gemini:generateContent"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(api_url=API_URL, api_key="test-key", timeout=0.5)


def gemini_body(text):
    return json.dumps({"candidates": [{"content": {"parts": [{"text": text}]}}]})


class Recorder:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, response=None, exc=None):
        self.response = response or httpx.Response(200, text=gemini_body("Hello"))
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def make_client(settings):
    def _make(handler):
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GeminiClient(settings, http)
    return _make
