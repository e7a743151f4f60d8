"""RSS 2.0 document assembly from an Atom feed model."""

from datetime import tzinfo
from xml.sax.saxutils import escape

from dateutil import tz

from .config import DEFAULT_INDENT
from .dates import format_pub_date
from .errors import SerializationError
from .formatter import beautify_xml
from .logging_config import create_execution_logger
from .models import AtomEntry, AtomFeed, RssChannel, RssItem
from .serializer import serialize_channel


class RssBuilder:
    """Maps an Atom feed onto RSS 2.0 and renders the formatted document."""

    def __init__(
        self,
        timezone: tzinfo = tz.UTC,
        indent: str = DEFAULT_INDENT,
        xml_declaration: bool = False,
        execution_id: str | None = None,
    ):
        """Initialize RssBuilder.

        Args:
            timezone: Zone used to render item publication dates
            indent: Indent unit of the formatted output
            xml_declaration: Whether to prepend an XML declaration
            execution_id: Execution ID for logging context
        """
        self.timezone = timezone
        self.indent = indent
        self.xml_declaration = xml_declaration
        self.logger = create_execution_logger("rss_builder", execution_id)

    def build_item(self, entry: AtomEntry) -> RssItem:
        # text fields are inner markup and go through untouched
        return RssItem(
            title=entry.title or "",
            link=escape(entry.link_href or ""),
            creator=entry.author_name or "",
            pub_date=escape(format_pub_date(entry.published, self.timezone)),
            description=entry.content or "",
        )

    def build_channel(self, feed: AtomFeed) -> RssChannel:
        """Apply the channel and item mapping rules.

        The self link wins over the first generic link. Absent source fields
        become empty strings and entries keep document order.
        """
        link = feed.self_link or feed.first_link or ""
        return RssChannel(
            title=feed.title or "",
            description=feed.description or "",
            pub_date=feed.updated or "",
            link=escape(link),
            author=feed.author_name or "",
            items=tuple(self.build_item(entry) for entry in feed.entries),
        )

    def to_xml(self, channel: RssChannel) -> str:
        """Serialize and indent a finished channel.

        Raises:
            SerializationError: If the document cannot be serialized
        """
        try:
            return beautify_xml(
                serialize_channel(channel),
                indent=self.indent,
                xml_declaration=self.xml_declaration,
            )
        except SerializationError as e:
            self.logger.error(f"Failed to serialize RSS document: {e}", error=str(e))
            raise

    def build(self, feed: AtomFeed) -> str:
        """Map ``feed`` to RSS 2.0 and return the formatted XML string."""
        channel = self.build_channel(feed)
        self.logger.debug("Channel assembled", entry_count=len(channel.items))
        return self.to_xml(channel)
