"""Unit tests for the Logfire monitoring helpers."""

import importlib
from unittest.mock import patch

from person_service import __version__
from person_service.core import monitoring


def test_initialize_logfire_disabled_is_noop():
    with (
        patch.object(monitoring, "LOGFIRE_ENABLED", False),
        patch("logfire.configure") as mock_configure,
        patch.object(monitoring, "logger") as mock_logger,
    ):
        monitoring.initialize_logfire()

    mock_configure.assert_not_called()
    assert "disabled" in mock_logger.info.call_args[0][0]


def test_initialize_logfire_without_token_warns():
    with (
        patch.object(monitoring, "LOGFIRE_ENABLED", True),
        patch.object(monitoring, "LOGFIRE_TOKEN", ""),
        patch("logfire.configure") as mock_configure,
        patch.object(monitoring, "logger") as mock_logger,
    ):
        monitoring.initialize_logfire()

    mock_configure.assert_not_called()
    mock_logger.warning.assert_called_once()


def test_initialize_logfire_instruments_app():
    sentinel_app = object()
    with (
        patch.object(monitoring, "LOGFIRE_ENABLED", True),
        patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
        patch("logfire.configure") as mock_configure,
        patch("logfire.instrument_sqlalchemy") as mock_sqlalchemy,
        patch("logfire.instrument_fastapi") as mock_fastapi,
    ):
        monitoring.initialize_logfire(sentinel_app)

    mock_configure.assert_called_once()
    mock_sqlalchemy.assert_called_once()
    mock_fastapi.assert_called_once_with(app=sentinel_app)


def test_log_api_request_skips_logfire_when_inactive():
    with patch.object(monitoring, "LOGFIRE_ENABLED", False), patch("logfire.info") as mock_info:
        monitoring.log_api_request("GET", "/person", 200, 1.5)

    mock_info.assert_not_called()


def test_log_api_request_forwards_when_active():
    with (
        patch.object(monitoring, "LOGFIRE_ENABLED", True),
        patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
        patch("logfire.info") as mock_info,
    ):
        monitoring.log_api_request("DELETE", "/person/1", 200, 3.0)

    kwargs = mock_info.call_args[1]
    assert kwargs["method"] == "DELETE"
    assert kwargs["status_code"] == 200


def test_log_error_forwards_when_active():
    with (
        patch.object(monitoring, "LOGFIRE_ENABLED", True),
        patch.object(monitoring, "LOGFIRE_TOKEN", "token"),
        patch("logfire.error") as mock_error,
    ):
        monitoring.log_error("PersistenceError", "duplicate {key}", {"path": "/person"})

    kwargs = mock_error.call_args[1]
    assert kwargs["error_message"] == "duplicate {key}"
    assert kwargs["path"] == "/person"


def test_service_version_defaults_to_package_version(monkeypatch):
    monkeypatch.delenv("LOGFIRE_SERVICE_VERSION", raising=False)

    reloaded = importlib.reload(monitoring)

    assert reloaded.LOGFIRE_SERVICE_VERSION == __version__
