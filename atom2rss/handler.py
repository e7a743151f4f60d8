"""Request/response entry point for the Atom to RSS converter."""

import json
from datetime import UTC, datetime
from typing import Any

from .config import Config
from .converter import convert
from .errors import ConverterError
from .fetch import FeedFetcher
from .logging_config import create_execution_logger, setup_structured_logging
from .session import EXPORT_FILENAME, EXPORT_MIME_TYPE

# Setup structured logging
setup_structured_logging(Config().log_level)

FAILURE_MESSAGE = "Error while loading XML"


def _json_response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def convert_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Fetch the Atom feed named in the event and return it converted to RSS 2.0.

    Args:
        event: Request data with ``url`` and an optional ``download`` flag
        context: Invocation context object

    Returns:
        Response dictionary with status, headers and body
    """
    execution_id = f"convert_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
    main_logger = create_execution_logger("main", execution_id)
    main_logger.log_execution_start(
        request_id=getattr(context, "aws_request_id", "unknown"),
    )

    event = event or {}
    url = event.get("url")
    if not url or not str(url).strip():
        main_logger.log_execution_end(success=False, error="missing url")
        return _json_response(
            400,
            {"message": "Feed URL is required", "execution_id": execution_id},
        )

    try:
        config = Config()
        main_logger.info("Configuration initialized")

        fetcher = FeedFetcher(config.get_fetch_config(), execution_id=execution_id)
        feed_text = fetcher.fetch(str(url))
        rss_text = convert(
            feed_text, config.get_output_config(), execution_id=execution_id
        )

    except (ConverterError, ValueError) as e:
        main_logger.error(f"Conversion failed for {url}: {e}", feed_url=url, error=str(e))
        main_logger.log_execution_end(success=False, error=str(e))
        return _json_response(
            502,
            {"message": FAILURE_MESSAGE, "execution_id": execution_id},
        )

    main_logger.log_execution_end(success=True, feed_url=url)

    if event.get("download"):
        return {
            "statusCode": 200,
            "headers": {
                "Content-Type": EXPORT_MIME_TYPE,
                "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"',
            },
            "body": rss_text,
        }

    return _json_response(
        200,
        {
            "message": "Feed converted to RSS 2.0",
            "execution_id": execution_id,
            "feed": feed_text,
            "rss": rss_text,
        },
    )
