"""Tests for settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest
import structlog
from pydantic import ValidationError

from storyfinder.config import ApiSettings, FinderSettings
from storyfinder.domain.models import RequestTarget
from storyfinder.logging import configure_logging


def test_settings_defaults(monkeypatch):
    for name in ("STORYFINDER_LOG_LEVEL", "STORYFINDER_SEARCH__DEFAULT_TERM"):
        monkeypatch.delenv(name, raising=False)
    settings = FinderSettings(_env_file=None)
    assert settings.search.default_term == "React"
    assert settings.search.skip_empty_term is False
    assert settings.storage.search_key == "search"
    assert settings.api.endpoint.endswith("?query=")


def test_settings_read_nested_environment(monkeypatch):
    monkeypatch.setenv("STORYFINDER_SEARCH__DEFAULT_TERM", "Vue")
    monkeypatch.setenv("STORYFINDER_SEARCH__SKIP_EMPTY_TERM", "true")
    monkeypatch.setenv("STORYFINDER_API__REQUEST_TIMEOUT_SECONDS", "5")
    settings = FinderSettings(_env_file=None)
    assert settings.search.default_term == "Vue"
    assert settings.search.skip_empty_term is True
    assert settings.api.request_timeout_seconds == 5


def test_endpoint_must_be_http():
    with pytest.raises(ValidationError):
        ApiSettings(endpoint="ftp://hn.example/search?query=")


def test_request_target_url_encodes_term():
    target = RequestTarget("https://hn.example/search?query=", "c++ & rust/go")
    assert target.url == "https://hn.example/search?query=c%2B%2B%20%26%20rust%2Fgo"


def test_configure_logging_outputs_json(capsys):
    configure_logging("DEBUG")
    try:
        logger = structlog.get_logger()
        logger.info("unit-test", foo="bar")
        out = capsys.readouterr().out
        assert "unit-test" in out
        assert '"foo": "bar"' in out
    finally:
        structlog.reset_defaults()


@pytest.mark.parametrize("level", ["warning", "WARNING", logging.WARNING])
def test_configure_logging_filters_below_level(capsys, level):
    configure_logging(level)
    try:
        logger = structlog.get_logger()
        logger.info("quiet-event")
        logger.warning("loud-event")
        out = capsys.readouterr().out
        assert "quiet-event" not in out
        assert "loud-event" in out
    finally:
        structlog.reset_defaults()
