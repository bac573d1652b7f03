from __future__ import annotations

from config import Settings


def test_defaults(monkeypatch):
    for key in ("MCP_HOST", "MCP_PORT", "MCP_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings.from_env()
    assert (settings.host, settings.port, settings.log_level) == ("127.0.0.1", 8085, "INFO")


def test_from_env(monkeypatch):
    monkeypatch.setenv("MCP_HOST", "0.0.0.0")
    monkeypatch.setenv("MCP_PORT", "9000")
    monkeypatch.setenv("MCP_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert (settings.host, settings.port, settings.log_level) == ("0.0.0.0", 9000, "DEBUG")
