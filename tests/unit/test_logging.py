"""Tests for tcgsearch.core.logging."""

import logging

import structlog

from tcgsearch.config import AppConfig, JustTCGConfig
from tcgsearch.core.logging import configure_logging


def _config(**overrides) -> AppConfig:
    return AppConfig(justtcg=JustTCGConfig(api_key="k"), **overrides)


def test_console_renderer_by_default():
    configure_logging(_config())
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_json_renderer_when_enabled():
    configure_logging(_config(json_logs=True))
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_level_taken_from_config():
    configure_logging(_config(log_level="debug"))
    assert logging.getLogger().level == logging.DEBUG

    configure_logging(_config(log_level="WARNING"))
    assert logging.getLogger().level == logging.WARNING


def test_falls_back_to_environment_config(monkeypatch):
    """Without an explicit config the JSON_LOGS setting is read via get_config()."""
    monkeypatch.setenv("JSON_LOGS", "true")
    configure_logging()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
