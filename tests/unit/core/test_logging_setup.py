"""
Tests for structured logging
"""
import json
import logging
from unittest.mock import patch

from core.logging import CustomJsonFormatter, LoggerAdapter, get_logger, setup_logging


class TestGetLogger:
    def test_returns_adapter_with_context(self):
        logger = get_logger("reports_test", domain="reports")

        assert isinstance(logger, LoggerAdapter)
        assert logger.logger.name == "reports_test"
        assert logger.extra == {"domain": "reports"}

    def test_with_context_extends_without_mutating(self):
        logger = get_logger("reports_test", domain="reports")

        child = logger.with_context(report_id="abc")

        assert child.extra == {"domain": "reports", "report_id": "abc"}
        assert logger.extra == {"domain": "reports"}

    def test_context_added_to_records(self, caplog):
        logger = get_logger("reports_test", domain="reports")

        with caplog.at_level(logging.INFO, logger="reports_test"):
            logger.info("Report generated", extra={"report_id": "abc"})

        record = caplog.records[-1]
        assert record.domain == "reports"
        assert record.report_id == "abc"

    def test_call_site_extra_wins(self, caplog):
        logger = get_logger("reports_test", domain="reports")

        with caplog.at_level(logging.INFO, logger="reports_test"):
            logger.info("Override", extra={"domain": "cli"})

        assert caplog.records[-1].domain == "cli"


class TestJsonFormatter:
    def test_adds_app_fields(self):
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("reports", logging.WARNING, __file__, 1, "Disk almost full", None, None)

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Disk almost full"
        assert payload["app"] == "Report Engine API"
        assert payload["version"] == "1.0.0"
        assert payload["environment"] == "test"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "reports"
        assert "timestamp" in payload


class TestSetupLogging:
    def test_text_format_in_tests(self):
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0].formatter, CustomJsonFormatter)

    def test_json_format_from_settings(self):
        with patch("core.logging.settings") as settings:
            settings.log_level = "INFO"
            settings.log_format = "json"
            setup_logging()

        try:
            assert isinstance(logging.getLogger().handlers[0].formatter, CustomJsonFormatter)
        finally:
            setup_logging()

    def test_explicit_arguments(self):
        try:
            setup_logging(level="debug", log_format="json")

            root_logger = logging.getLogger()
            assert root_logger.level == logging.DEBUG
            assert isinstance(root_logger.handlers[0].formatter, CustomJsonFormatter)
            assert logging.getLogger("uvicorn.access").level == logging.WARNING
        finally:
            setup_logging()
