"""Unit tests for structured logging."""

import json
import logging
from io import StringIO

from atom2rss.logging_config import (
    ExecutionLogger,
    StructuredFormatter,
    create_execution_logger,
)


def _capture(logger: ExecutionLogger) -> tuple[StringIO, logging.Handler]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.DEBUG)
    return stream, handler


class TestStructuredLoggingUnit:
    """Unit tests for StructuredFormatter and ExecutionLogger."""

    def test_records_are_json_with_context(self):
        logger = create_execution_logger("feed_parser", "exec-1")
        stream, handler = _capture(logger)
        try:
            logger.info("Feed model extracted", entry_count=3, feed_url="https://example.org/")
        finally:
            logger.logger.removeHandler(handler)

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "Feed model extracted"
        assert record["level"] == "INFO"
        assert record["logger"] == "atom2rss.feed_parser"
        assert record["execution_id"] == "exec-1"
        assert record["component"] == "feed_parser"
        assert record["entry_count"] == 3
        assert record["feed_url"] == "https://example.org/"

    def test_execution_start_and_end(self):
        logger = create_execution_logger("converter", "exec-2")
        stream, handler = _capture(logger)
        try:
            logger.log_execution_start()
            logger.log_execution_end(success=True)
        finally:
            logger.logger.removeHandler(handler)

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert lines[0]["message"] == "Starting converter execution"
        assert lines[1]["message"] == "Completed converter execution"
        assert logger.end_time >= logger.start_time

    def test_execution_id_generated_when_missing(self):
        logger = create_execution_logger("session")

        assert logger.execution_id.startswith("exec_")
