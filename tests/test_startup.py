"""App startup wiring: lifespan, the real Gemini client and settings."""

import logging
from types import SimpleNamespace

import httpx
import pytest

import config
from gemini_client import GeminiClient
from main import app, get_gemini_client, lifespan


async def test_lifespan_builds_gemini_client_from_config(monkeypatch, caplog):
    monkeypatch.setattr(config, "GEMINI_API_KEY", "secret-key-123")
    monkeypatch.setattr(config, "GEMINI_MODEL", "gemini-test-model")
    monkeypatch.setattr(config, "GEMINI_API_BASE", "https://gemini.test/v1beta")
    caplog.set_level(logging.INFO, logger="main")

    async with lifespan(app):
        gemini = app.state.gemini
        assert isinstance(gemini, GeminiClient)
        assert gemini.model == "gemini-test-model"
        assert gemini.base_url == "https://gemini.test/v1beta"
        assert gemini.api_key == "secret-key-123"
        assert isinstance(gemini.http_client, httpx.AsyncClient)
        assert get_gemini_client(SimpleNamespace(app=app)) is gemini

    assert gemini.http_client.is_closed
    assert "API Key loaded: Yes" in caplog.text
    assert "secret-key-123" not in caplog.text
    del app.state.gemini


async def test_lifespan_reports_missing_key(monkeypatch, caplog):
    monkeypatch.setattr(config, "GEMINI_API_KEY", None)
    caplog.set_level(logging.INFO, logger="main")

    async with lifespan(app):
        assert app.state.gemini.api_key is None

    assert "API Key loaded: No" in caplog.text
    del app.state.gemini


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, config.DEFAULT_CORS_ORIGINS),
        ("", config.DEFAULT_CORS_ORIGINS),
        (" a, ,b ", ["a", "b"]),
    ],
)
def test_split_origins(raw, expected):
    assert config._split_origins(raw) == expected


def test_split_origins_returns_a_copy_of_defaults():
    origins = config._split_origins(None)
    origins.append("https://other.example")
    assert "https://other.example" not in config.DEFAULT_CORS_ORIGINS


@pytest.mark.parametrize("value,expected", [("development", True), ("Development", True),
                                            ("production", False)])
def test_is_development(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)
    assert config.is_development() is expected
