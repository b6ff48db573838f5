"""Unit tests for structured logging module."""

import io
import json
import logging
import os
from unittest.mock import MagicMock, patch

import pytest

from wsdclient.infra.logging import StructuredLogger, configure_logging, get_logger, redact_secret


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def test_log_methods_exist(self) -> None:
        """Test that all standard log methods are available."""
        mock_logger = MagicMock(spec=logging.Logger)
        logger = StructuredLogger(mock_logger)

        logger.debug("debug message")
        logger.info("info message")
        logger.warning("warning message")
        logger.error("error message")
        logger.exception("exception message")
        logger.critical("critical message")

        assert mock_logger.log.call_count == 6

    def test_extra_fields_passed(self) -> None:
        """Test that extra fields are passed to the underlying logger."""
        mock_logger = MagicMock(spec=logging.Logger)
        logger = StructuredLogger(mock_logger)

        logger.info("test message", url="http://host", error_count=2)

        mock_logger.log.assert_called_once()
        call_args = mock_logger.log.call_args
        assert call_args[0] == (logging.INFO, "test message")
        extra = call_args[1]["extra"]
        assert extra["url"] == "http://host"
        assert extra["error_count"] == 2
        assert call_args[1]["exc_info"] is False

    def test_exception_attaches_exc_info(self) -> None:
        """Test exception() logs at ERROR with exc_info."""
        mock_logger = MagicMock(spec=logging.Logger)
        StructuredLogger(mock_logger).exception("failed")
        call_args = mock_logger.log.call_args
        assert call_args[0] == (logging.ERROR, "failed")
        assert call_args[1]["exc_info"] is True


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_structured_logger(self) -> None:
        """Test that get_logger returns a StructuredLogger instance."""
        assert isinstance(get_logger("test.module"), StructuredLogger)

    @patch.dict(os.environ, {"WSDCLIENT_LOG_LEVEL": "DEBUG"})
    def test_log_level_from_env(self) -> None:
        """Test that log level is set from environment variable."""
        logging.getLogger("test.env.logger").handlers.clear()

        get_logger("test.env.logger")
        assert logging.getLogger("test.env.logger").level == logging.DEBUG

    @patch.dict(os.environ, {}, clear=True)
    def test_default_log_level(self) -> None:
        """Test that default log level is INFO when env var not set."""
        logging.getLogger("test.default.logger").handlers.clear()

        get_logger("test.default.logger")
        assert logging.getLogger("test.default.logger").level == logging.INFO

    def test_logger_reuse(self) -> None:
        """Test that calling get_logger twice keeps a single handler."""
        get_logger("test.reuse")
        get_logger("test.reuse")
        assert len(logging.getLogger("test.reuse").handlers) == 1


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_redirects_stream_and_level(self) -> None:
        """Test loggers are re-pointed to the given stream and level."""
        logging.getLogger("test.configure").handlers.clear()
        logger = get_logger("test.configure")
        stream = io.StringIO()

        configure_logging(level=logging.WARNING, stream=stream)
        logger.info("hidden")
        logger.warning("shown", attempt=1)

        lines = stream.getvalue().strip().splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["message"] == "shown"
        assert entry["attempt"] == 1
        assert len(logging.getLogger("test.configure").handlers) == 1


class TestStructuredFormatter:
    """Tests for StructuredFormatter output format."""

    def test_json_format_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        """Test that logs are output in JSON format."""
        logging.getLogger("test.json.format").handlers.clear()

        logger = get_logger("test.json.format")
        logger.info("test message", url="http://host", size_bytes=50)

        log_entry = json.loads(capfd.readouterr().out.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "test message"
        assert log_entry["logger"] == "test.json.format"
        assert log_entry["url"] == "http://host"
        assert log_entry["size_bytes"] == 50
        assert "ts" in log_entry


class TestRedactSecret:
    """Tests for redact_secret."""

    def test_redacts(self) -> None:
        """Test secrets are replaced by a stable tag."""
        redacted = redact_secret("my-api-key")
        assert redacted is not None
        assert "my-api-key" not in redacted
        assert redacted.startswith("[REDACTED_")
        assert redacted == redact_secret("my-api-key")

    def test_none(self) -> None:
        """Test None passes through."""
        assert redact_secret(None) is None
