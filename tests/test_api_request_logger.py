"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from transport_cli.adapters.api_request_logger import log_api_request


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("transport_cli.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(self, mock_logger: object) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        log_api_request("GET", "https://example.com/api", enabled=False)

        mock_logger.info.assert_not_called()

    @patch("transport_cli.adapters.api_request_logger.logger")
    def test_when_enabled_then_logs(self, mock_logger: object) -> None:
        """Given logging enabled, when calling log_api_request, then logs once."""
        log_api_request("GET", "https://example.com/api", enabled=True)

        mock_logger.info.assert_called_once()

    @patch("transport_cli.adapters.api_request_logger.logger")
    def test_when_disabled_then_environment_is_ignored(
        self, mock_logger: object, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given enabled=False and TRANSPORT_LOG_REQUESTS=true, when calling, then does not log."""
        monkeypatch.setenv("TRANSPORT_LOG_REQUESTS", "true")

        log_api_request("GET", "https://example.com/api", enabled=False)

        mock_logger.info.assert_not_called()

    @patch("transport_cli.adapters.api_request_logger.logger")
    def test_logs_full_url_with_sorted_params(self, mock_logger: object) -> None:
        """Given params, when logging, then the URL lists them in sorted order."""
        log_api_request(
            "GET",
            "https://transport.opendata.ch/v1/connections",
            params={"to": "Thun", "from": "Bern"},
            enabled=True,
        )

        message = mock_logger.info.call_args[0][0]
        assert "GET https://transport.opendata.ch/v1/connections?from=Bern&to=Thun" in message

    @patch("transport_cli.adapters.api_request_logger.logger")
    def test_redacts_sensitive_headers(self, mock_logger: object) -> None:
        """Given sensitive headers, when logging, then their values are redacted."""
        log_api_request(
            "GET",
            "https://example.com/api",
            headers={"Accept": "application/json", "Authorization": "Bearer secret"},
            enabled=True,
        )

        message = mock_logger.info.call_args[0][0]
        assert "application/json" in message
        assert "secret" not in message
        assert "***REDACTED***" in message
