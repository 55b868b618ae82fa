"""Unit tests for the logging utilities."""

import io
import json
import logging

import pytest

from docsmith.utils.logging import (
    DocsmithLogger,
    JSONFormatter,
    LogMode,
    TextFormatter,
    configure_from_cli,
    get_logger,
    setup_logging,
)


def _record(msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("docsmith.test", level, __file__, 1, msg, None, None)


class TestFormatters:
    """Tests for the log formatters."""

    def test_text_plain(self) -> None:
        """Test human mode format."""
        assert TextFormatter().format(_record()) == "[INFO] hello"

    def test_text_with_timestamps(self) -> None:
        """Test verbose mode format."""
        line = TextFormatter(timestamps=True).format(_record())
        assert line.startswith("[INFO][")
        assert line.endswith("] docsmith.test: hello")

    def test_text_colors(self) -> None:
        """Test that colors wrap the level only when enabled."""
        line = TextFormatter(use_colors=True).format(_record(level=logging.ERROR))
        assert line.startswith("\033[31m[ERROR]")

    def test_json(self) -> None:
        """Test JSON lines output with extra data."""
        record = _record()
        record.extra_data = {"files": 3}
        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "docsmith.test"
        assert entry["msg"] == "hello"
        assert entry["files"] == 3
        assert "ts" in entry


class TestSetup:
    """Tests for logger configuration."""

    def test_get_logger_type(self) -> None:
        """Test that docsmith loggers support structured logging."""
        assert isinstance(get_logger("docsmith.test_logging"), DocsmithLogger)

    def test_json_mode_structured(self) -> None:
        """Test that structured data reaches JSON output."""
        stream = io.StringIO()
        setup_logging(mode=LogMode.JSON, level=logging.INFO, stream=stream)

        get_logger().structured(logging.INFO, "done", files=2)

        entry = json.loads(stream.getvalue().strip())
        assert (entry["msg"], entry["files"]) == ("done", 2)

    def test_level_filtering(self) -> None:
        """Test that messages below the level are dropped."""
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        logger = logging.getLogger("docsmith.orchestrator")
        logger.info("hidden")
        logger.warning("shown")

        assert stream.getvalue() == "[WARNING] shown\n"

    @pytest.mark.parametrize(
        ("flags", "level"),
        [
            ({}, logging.INFO),
            ({"verbose": True}, logging.DEBUG),
            ({"quiet": True}, logging.WARNING),
            ({"ci": True}, logging.INFO),
        ],
    )
    def test_configure_from_cli_levels(self, flags: dict, level: int) -> None:
        """Test the level chosen for each flag combination."""
        configure_from_cli(**flags)
        assert logging.getLogger("docsmith").level == level

    def test_ci_uses_json(self) -> None:
        """Test that CI mode installs the JSON formatter."""
        configure_from_cli(ci=True)
        handler = logging.getLogger("docsmith").handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)
