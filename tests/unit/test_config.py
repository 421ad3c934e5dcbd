"""Unit tests for environment-driven settings."""

import pytest

from src.config import Settings


@pytest.mark.unit
def test_defaults():
    settings = Settings.from_env()

    assert settings.resume_path is None
    assert settings.server_name == "Resume Server"
    assert settings.server_version == "1.0.0"
    assert settings.transport == "stdio"
    assert settings.port == 8787
    assert settings.cors_origins == ("*",)
    assert settings.log_level == "INFO"


@pytest.mark.unit
def test_overrides(monkeypatch):
    monkeypatch.setenv("RESUME_PATH", "/data/resume.json")
    monkeypatch.setenv("SERVER_URL", "https://resume.example.com/")
    monkeypatch.setenv("MCP_TRANSPORT", "SSE")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.resume_path == "/data/resume.json"
    assert settings.server_url == "https://resume.example.com"
    assert settings.transport == "sse"
    assert settings.port == 9000
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"


@pytest.mark.unit
def test_empty_resume_path_means_unset(monkeypatch):
    monkeypatch.setenv("RESUME_PATH", "")
    assert Settings.from_env().resume_path is None


@pytest.mark.unit
def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError, match="PORT"):
        Settings.from_env()


@pytest.mark.unit
def test_invalid_transport(monkeypatch):
    monkeypatch.setenv("MCP_TRANSPORT", "carrier-pigeon")
    with pytest.raises(ValueError, match="MCP_TRANSPORT"):
        Settings.from_env()
