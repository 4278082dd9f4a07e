"""
Unit Tests for configuration and logging setup
"""

import logging
import sys

import pytest
from pydantic import ValidationError
from pythonjsonlogger.json import JsonFormatter

from outline_mcp.config import OutlineSettings, LogSettings
from outline_mcp.logging_config import setup_logging


class TestOutlineSettings:
    """Tests for OutlineSettings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("OUTLINE_API_KEY", "ol_api_123")
        monkeypatch.setenv("OUTLINE_INSTANCE_URL", "https://docs.example.org/")

        settings = OutlineSettings()

        assert settings.api_key == "ol_api_123"
        assert settings.instance_url == "https://docs.example.org"
        assert settings.timeout_seconds is None

    def test_missing_values_rejected(self, monkeypatch):
        monkeypatch.delenv("OUTLINE_API_KEY", raising=False)
        monkeypatch.delenv("OUTLINE_INSTANCE_URL", raising=False)

        with pytest.raises(ValidationError):
            OutlineSettings()

    def test_empty_values_rejected(self, monkeypatch):
        monkeypatch.setenv("OUTLINE_API_KEY", "")
        monkeypatch.setenv("OUTLINE_INSTANCE_URL", "https://docs.example.org")

        with pytest.raises(ValidationError):
            OutlineSettings()

    def test_timeout_optional(self, monkeypatch):
        monkeypatch.setenv("OUTLINE_API_KEY", "k")
        monkeypatch.setenv("OUTLINE_INSTANCE_URL", "https://docs.example.org")
        monkeypatch.setenv("OUTLINE_TIMEOUT_SECONDS", "12.5")

        assert OutlineSettings().timeout_seconds == 12.5


class TestLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_text_format_on_stderr(self):
        setup_logging(LogSettings(LOG_LEVEL="WARNING", LOG_FORMAT="text"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_json_format(self):
        setup_logging(LogSettings(LOG_LEVEL="DEBUG", LOG_FORMAT="json"))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
