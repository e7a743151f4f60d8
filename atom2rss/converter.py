"""Atom to RSS 2.0 conversion pipeline."""

from .builder import RssBuilder
from .config import OutputConfig
from .dates import resolve_timezone
from .logging_config import create_execution_logger
from .parser import FeedParser


def convert(
    xml_text: str | bytes,
    output_config: OutputConfig | None = None,
    execution_id: str | None = None,
) -> str:
    """Convert Atom feed text into a formatted RSS 2.0 document.

    Each call is independent: the same input always yields the same output.

    Args:
        xml_text: Raw Atom feed text
        output_config: Output settings, defaults when omitted
        execution_id: Execution ID for logging context

    Returns:
        Indented RSS 2.0 XML

    Raises:
        ParseError: If the input is not well-formed XML
        SerializationError: If the RSS document cannot be serialized
    """
    output_config = output_config or OutputConfig()
    logger = create_execution_logger("converter", execution_id)
    logger.log_execution_start()

    parser = FeedParser(execution_id=logger.execution_id)
    builder = RssBuilder(
        timezone=resolve_timezone(output_config.timezone),
        indent=output_config.indent,
        xml_declaration=output_config.xml_declaration,
        execution_id=logger.execution_id,
    )

    try:
        feed = parser.read_feed(parser.parse(xml_text))
        rss = builder.build(feed)
    except Exception as e:
        logger.log_execution_end(success=False, error=str(e))
        raise

    logger.log_conversion(len(feed.entries), len(rss))
    logger.log_execution_end(success=True)
    return rss
