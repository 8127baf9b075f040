import json
import pytest
import httpx
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from truthcheck.config import Settings


def make_gemini_response(text: str, chunks=None) -> dict:
    candidate = {"content": {"role": "model", "parts": [{"text": text}]}}
    if chunks is not None:
        candidate["groundingMetadata"] = {"groundingChunks": chunks}
    return {"candidates": [candidate]}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, response_json=None, status_code: int = 200, exc: Exception = None):
        self.requests = []
        self.response_json = response_json
        self.status_code = status_code
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.response_json)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test_gemini_key", GEMINI_MODEL="gemini-2.5-flash", _env_file=None)


@pytest.fixture
def settings_without_key():
    return Settings(GEMINI_API_KEY=None, _env_file=None)


@pytest.fixture
def sample_analysis():
    return {
        "classification": "Fake",
        "reasoning": "The wall is too narrow to be seen from low Earth orbit without aid.",
        "topic": "Science",
        "keywords": ["Great Wall", "space", "visibility"],
        "confidence": 92,
        "sentiment": "NEUTRAL",
        "bias": "NEUTRAL",
    }


@pytest.fixture
def sample_chunks():
    return [
        {"web": {"uri": "https://www.nasa.gov/great-wall", "title": "nasa.gov"}},
        {"retrievedContext": {"uri": "gs://bucket/doc", "title": "internal"}},
        {"web": {"uri": "https://www.scientificamerican.com/wall", "title": "scientificamerican.com"}},
    ]


@pytest.fixture
def sample_gemini_response(sample_analysis, sample_chunks):
    """Sample grounded Gemini API response with a fenced JSON payload."""
    text = "```json\n" + json.dumps(sample_analysis) + "\n```"
    return make_gemini_response(text, sample_chunks)


@pytest.fixture
def recording_transport(sample_gemini_response):
    return RecordingTransport(response_json=sample_gemini_response)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient for patching the default client path."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock()
    return mock_client


@pytest.fixture
def test_client(settings, recording_transport):
    """TestClient whose analysis client talks to the recording transport."""
    from truthcheck.main import app, get_analysis_client
    from truthcheck.services import AnalysisClient

    http_client = httpx.AsyncClient(transport=recording_transport)
    app.dependency_overrides[get_analysis_client] = lambda: AnalysisClient(settings, http_client)
    yield TestClient(app)
    app.dependency_overrides.clear()
