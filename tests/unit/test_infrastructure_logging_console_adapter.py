"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- error/critical expand an ``error`` exception into type and message
- Context binding
- Real output in JSON mode

Architecture:
- Unit tests with mocked structlog, plus one real JSON round through stdout
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

MODULE = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, level):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("resource_shared", client_id="123", notified=3)

            getattr(mock_logger, level).assert_called_once_with(
                "resource_shared", client_id="123", notified=3
            )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_error_expands_exception(self, level):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)(
                "notification_email_failed",
                error=ConnectionRefusedError("smtp down"),
                kind="session_reminder",
            )

            getattr(mock_logger, level).assert_called_once_with(
                "notification_email_failed",
                kind="session_reminder",
                error_type="ConnectionRefusedError",
                error_message="smtp down",
            )

    def test_error_without_exception(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("session_reminder_failed", client_id="abc")

            mock_logger.error.assert_called_once_with(
                "session_reminder_failed", client_id="abc"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    def test_bind_returns_new_adapter_with_context(self):
        with patch(MODULE) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.with_context(job="session_reminders")
            bound.info("session_reminder_scan_started")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(job="session_reminders")
            bound_logger.info.assert_called_once_with("session_reminder_scan_started")


@pytest.mark.unit
class TestConsoleAdapterOutput:
    def test_json_mode_writes_json_lines(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.info("notification_in_app_created", kind="resource_shared")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "notification_in_app_created"
        assert record["kind"] == "resource_shared"
        assert record["level"] == "info"
