"""Shared fixtures: fake Gemini client + ASGI test client."""

import os

# keep tests away from a real key / .env settings
os.environ.setdefault("GEMINI_API_KEY", "test-fake-key")
os.environ.setdefault("APP_ENV", "production")

import pytest
from httpx import ASGITransport, AsyncClient

from main import app, get_gemini_client


class FakeGemini:
    """Stands in for GeminiClient; records prompts, returns or raises."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def generate_json(self, prompt, response_schema):
        self.calls.append((prompt, response_schema))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_gemini():
    return FakeGemini(
        result={"status": "True", "explanation": "Confirmed by two sources."}
    )


@pytest.fixture
async def client(fake_gemini):
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
