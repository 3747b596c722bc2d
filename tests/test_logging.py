"""Tests for logging setup."""

import json
import logging
import logging.handlers

from laraview.logging import JSONFormatter, LoggerConfig, getLogger


class TestGetLogger:
    """Test logger naming."""

    def test_nests_under_package_logger(self):
        """Module names are placed below 'laraview'."""
        assert getLogger().name == "laraview"
        assert getLogger("laraview.view").name == "laraview.view"
        assert getLogger("myapp.views").name == "laraview.myapp.views"


class TestJSONFormatter:
    """Test structured output."""

    def test_formats_record_as_json(self):
        """Records become JSON objects including extra fields."""
        record = logging.LogRecord(
            "laraview.view", logging.INFO, __file__, 10, "Compiled %s", ("index",), None
        )
        record.view = "index"

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "laraview.view"
        assert data["message"] == "Compiled index"
        assert data["view"] == "index"


class TestLoggerConfig:
    """Test handler setup."""

    def test_setup_stream_logger(self):
        """A single stream handler is attached and propagation is off."""
        logger = LoggerConfig.setup_logger(
            name="laraview-test-stream", format_type="json", level=logging.DEBUG
        )
        LoggerConfig.setup_logger(name="laraview-test-stream", format_type="json", level=logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_setup_file_logger(self, tmp_path):
        """A file name switches to a rotating file handler."""
        path = tmp_path / "views.log"

        logger = LoggerConfig.setup_logger(
            name="laraview-test-file", format_type="text", level=logging.INFO, file_name=str(path)
        )
        logger.info("compiled")
        handler = logger.handlers[0]
        handler.flush()

        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        assert "compiled" in path.read_text(encoding="utf-8")

        handler.close()

    def test_level_by_environment(self):
        """Known environments map to levels, others default to INFO."""
        assert LoggerConfig.get_level_by_environment("production") == logging.WARNING
        assert LoggerConfig.get_level_by_environment("Development") == logging.DEBUG
        assert LoggerConfig.get_level_by_environment("unknown") == logging.INFO
