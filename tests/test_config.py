"""Tests for settings loaded from the environment."""

import logging

import pytest

from jss.config import Settings


class TestFromEnv:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JSS_STRICT", raising=False)
        monkeypatch.delenv("JSS_INDENT_WIDTH", raising=False)
        assert Settings.from_env() == Settings(strict=False, indent="    ")

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_strict(self, monkeypatch, value):
        monkeypatch.setenv("JSS_STRICT", value)
        assert Settings.from_env().strict is True

    def test_not_strict(self, monkeypatch):
        monkeypatch.setenv("JSS_STRICT", "0")
        assert Settings.from_env().strict is False

    def test_indent_width(self, monkeypatch):
        monkeypatch.setenv("JSS_INDENT_WIDTH", "2")
        assert Settings.from_env().indent == "  "

    def test_bad_indent_width_falls_back_to_default(self, monkeypatch, caplog):
        monkeypatch.setenv("JSS_INDENT_WIDTH", "wide")
        with caplog.at_level(logging.WARNING, logger="jss.config"):
            assert Settings.from_env().indent == "    "
        assert "JSS_INDENT_WIDTH" in caplog.text


class TestSettings:
    def test_frozen(self):
        with pytest.raises(AttributeError):
            Settings().strict = True  # type: ignore[misc]
