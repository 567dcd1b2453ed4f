"""Tests for the logging setup."""

import io
import json
import logging
import sys
from uuid import UUID

import pytest
from infrastructure.config import APP_LOGGER_NAME, get_logger, log_context, setup_logger
from infrastructure.config.logger import JSONFormatter, TextFormatter

JOB_ID = UUID("00000000-0000-0000-0000-000000000001")


def make_record(message: str = "Job filled", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name=f"{APP_LOGGER_NAME}.CapacityController",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    # 2026-03-02 08:00:00 UTC
    record.created = 1772438400.0
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def isolated_logger():
    """Logger name that is not shared with the application logger."""
    name = "labormatch_setup_test"
    yield name
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = True


class TestLogContext:
    def test_drops_missing_fields(self):
        assert log_context(job_id=JOB_ID, labor_id=None) == {"context": {"job_id": JOB_ID}}


class TestJSONFormatter:
    """Test structured output."""

    def test_timestamp_comes_from_the_record(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["timestamp"] == "2026-03-02T08:00:00+00:00"
        assert data["logger"] == "labormatch.CapacityController"
        assert data["message"] == "Job filled"
        assert "context" not in data

    def test_context_is_serialized(self):
        record = make_record(**log_context(job_id=JOB_ID, labor_id="labor-1"))
        data = json.loads(JSONFormatter().format(record))
        assert data["context"] == {"job_id": str(JOB_ID), "labor_id": "labor-1"}

    def test_exception_is_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record()
            record.exc_info = sys.exc_info()
        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestTextFormatter:
    """Test development output."""

    def test_plain_line_with_context(self):
        record = make_record(**log_context(job_id=JOB_ID))
        line = TextFormatter(use_color=False).format(record)
        assert line == (
            "[2026-03-02 08:00:00] INFO     - labormatch.CapacityController - "
            f"Job filled [job_id={JOB_ID}]"
        )

    def test_colored_level(self):
        line = TextFormatter(use_color=True).format(make_record())
        assert line.startswith("\033[32m[2026-03-02 08:00:00] INFO")


class TestSetupLogger:
    """Test handler installation."""

    def test_module_loggers_are_nested(self):
        assert get_logger("ApplyForJobUseCase").name == "labormatch.ApplyForJobUseCase"
        assert get_logger("labormatch.db").name == "labormatch.db"
        assert get_logger().name == APP_LOGGER_NAME

    def test_json_output_to_stream(self, isolated_logger):
        stream = io.StringIO()
        logger = setup_logger(isolated_logger, level="debug", log_format="json", stream=stream)

        logger.debug("Expired 2 overdue job(s)", extra=log_context(count=2))

        data = json.loads(stream.getvalue())
        assert data["level"] == "DEBUG"
        assert data["context"] == {"count": 2}

    def test_repeated_setup_keeps_one_handler(self, isolated_logger):
        setup_logger(isolated_logger, stream=io.StringIO())
        logger = setup_logger(isolated_logger, stream=io.StringIO())
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_text_output_is_uncolored_off_terminal(self, isolated_logger):
        stream = io.StringIO()
        logger = setup_logger(isolated_logger, log_format="text", stream=stream)

        logger.info("Database initialized")

        assert "\033[" not in stream.getvalue()

    def test_unknown_level_is_rejected(self, isolated_logger):
        with pytest.raises(ValueError):
            setup_logger(isolated_logger, level="LOUD")
