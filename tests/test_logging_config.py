"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from keycloak_csi.config.logging_config import (
    JsonFormatter,
    LoggingConfig,
    get_log_level_from_verbosity,
)
from keycloak_csi.core.exceptions import KeycloakRemoteError


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore the global logging state changed by LoggingConfig.configure()."""
    names = [None, *LoggingConfig.QUIET_MODULES, *LoggingConfig.ERROR_ONLY_MODULES]
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers), logger.propagate)

    yield

    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
        logger.propagate = propagate


@pytest.mark.parametrize(
    "verbosity, level",
    [("QUIET", "ERROR"), ("normal", "INFO"), ("VERBOSE", "INFO"), ("DEBUG", "DEBUG"), ("unknown", "INFO")],
)
def test_log_level_from_verbosity(verbosity, level):
    assert get_log_level_from_verbosity(verbosity) == level


def test_configure_quiets_http_libraries(monkeypatch):
    monkeypatch.setenv("LOG_VERBOSITY", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")

    LoggingConfig.configure()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_configure_normal_keeps_access_log_at_warning(monkeypatch):
    monkeypatch.setenv("LOG_VERBOSITY", "NORMAL")
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    LoggingConfig.configure()

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_json_format_escapes_quoted_messages(monkeypatch, capsys):
    monkeypatch.setenv("LOG_VERBOSITY", "NORMAL")
    monkeypatch.setenv("LOG_FORMAT", "json")
    LoggingConfig.configure()
    error = KeycloakRemoteError(403, '{"error":"unknown_error"}', step="resolving client ID")

    logging.getLogger("keycloak_csi.app").error(f"POST /node/volumes/v/publish failed: {error}")

    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    record = json.loads(lines[-1])
    assert record["level"] == "ERROR"
    assert record["module"] == "keycloak_csi.app"
    assert record["message"] == (
        'POST /node/volumes/v/publish failed: resolving client ID: '
        'server error status 403: {"error":"unknown_error"}'
    )


def test_json_formatter_includes_exception():
    formatter = JsonFormatter()
    try:
        raise ValueError("bad value")
    except ValueError:
        exc_info = sys.exc_info()
    record = logging.LogRecord("test", logging.ERROR, __file__, 1, "failed", None, exc_info)

    record_data = json.loads(formatter.format(record))

    assert record_data["message"] == "failed"
    assert "ValueError: bad value" in record_data["exception"]
