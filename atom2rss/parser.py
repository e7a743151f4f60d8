"""Atom feed parsing for the Atom to RSS converter."""

import copy

from bs4 import BeautifulSoup, Tag
from bs4.element import NamespacedAttribute
from lxml import etree

from .errors import ParseError
from .logging_config import create_execution_logger
from .models import AtomEntry, AtomFeed

AtomDocument = BeautifulSoup

FEED_TITLE = "feed > title"
FEED_DESCRIPTION = "feed > description"
FEED_UPDATED = "feed > updated"
FEED_SELF_LINK = 'feed > link[rel="self"]'
FEED_LINK = "feed > link"
FEED_AUTHOR_NAME = "feed > author > name"
FEED_ENTRIES = "feed > entry"

ENTRY_TITLE = ":scope > title"
ENTRY_LINK = ":scope > link"
ENTRY_AUTHOR_NAME = ":scope > author > name"
ENTRY_PUBLISHED = ":scope > published"
ENTRY_CONTENT = ":scope > content"

RESERVED_PREFIXES = ("xml", "xmlns")


def undeclared_namespaces(tag: Tag) -> dict[str, str]:
    """Map prefixes used in ``tag``'s subtree but declared outside it to their URIs."""
    used = {}
    declared = set()
    for node in [tag, *tag.find_all(True)]:
        if node.prefix and node.prefix not in RESERVED_PREFIXES:
            used.setdefault(node.prefix, node.namespace)
        for key in node.attrs:
            if str(key).startswith("xmlns:"):
                declared.add(str(key)[len("xmlns:"):])
            elif isinstance(key, NamespacedAttribute) and key.prefix:
                if key.prefix not in RESERVED_PREFIXES:
                    used.setdefault(key.prefix, key.namespace)
    return {
        prefix: uri for prefix, uri in used.items() if uri and prefix not in declared
    }


class FeedParser:
    """Turns raw Atom XML text into a navigable document."""

    def __init__(self, execution_id: str | None = None):
        self.logger = create_execution_logger("feed_parser", execution_id)

    def parse(self, xml_text: str | bytes) -> AtomDocument:
        """Parse Atom XML text.

        Well-formedness is checked with a strict parser first, lookups then
        run over a BeautifulSoup tree. The Atom schema is not validated: a
        document without a ``feed`` root simply yields empty lookups.

        Args:
            xml_text: Raw feed text (``str``) or bytes as downloaded

        Returns:
            Parsed document supporting CSS selector lookups

        Raises:
            ParseError: If the text is not well-formed XML
        """
        # text was already decoded, so its encoding declaration no longer applies
        encoding = "utf-8" if isinstance(xml_text, str) else None
        strict_parser = etree.XMLParser(
            encoding=encoding, resolve_entities=False, no_network=True
        )

        try:
            data = xml_text.encode("utf-8") if encoding else xml_text
            etree.fromstring(data, strict_parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            self.logger.error(f"Feed is not well-formed XML: {e}", error=str(e))
            raise ParseError(f"Malformed XML: {e}") from e

        document = BeautifulSoup(xml_text, "xml")
        self.logger.debug("Feed parsed", input_length=len(data))
        return document

    def extract_text(self, document: Tag, path: str) -> str | None:
        """Return the inner markup of the first element matching ``path``.

        Children are serialized as XML with text escaped, so the value can
        be placed inside another element verbatim. Namespace prefixes declared
        on an ancestor are redeclared on the top-level child elements.
        """
        element = document.select_one(path)
        if element is None:
            return None

        fragment = copy.copy(element)
        for child in fragment.find_all(True, recursive=False):
            for prefix, uri in undeclared_namespaces(child).items():
                child[f"xmlns:{prefix}"] = uri
        return fragment.decode_contents()

    def extract_attribute(self, document: Tag, path: str, attribute: str) -> str | None:
        """Return an attribute of the first element matching ``path``."""
        element = document.select_one(path)
        if element is None:
            return None
        return element.get(attribute)

    def list_entries(self, document: Tag) -> list[Tag]:
        """Return all ``entry`` children of ``feed`` in document order."""
        return document.select(FEED_ENTRIES)

    def read_entry(self, entry: Tag) -> AtomEntry:
        return AtomEntry(
            title=self.extract_text(entry, ENTRY_TITLE),
            link_href=self.extract_attribute(entry, ENTRY_LINK, "href"),
            author_name=self.extract_text(entry, ENTRY_AUTHOR_NAME),
            published=self.extract_text(entry, ENTRY_PUBLISHED),
            content=self.extract_text(entry, ENTRY_CONTENT),
        )

    def read_feed(self, document: Tag) -> AtomFeed:
        """Build the logical feed model from a parsed document.

        Missing elements are represented as ``None``, never as errors.
        """
        entries = tuple(self.read_entry(entry) for entry in self.list_entries(document))

        feed = AtomFeed(
            title=self.extract_text(document, FEED_TITLE),
            description=self.extract_text(document, FEED_DESCRIPTION),
            updated=self.extract_text(document, FEED_UPDATED),
            self_link=self.extract_attribute(document, FEED_SELF_LINK, "href"),
            first_link=self.extract_attribute(document, FEED_LINK, "href"),
            author_name=self.extract_text(document, FEED_AUTHOR_NAME),
            entries=entries,
        )

        self.logger.info(
            "Feed model extracted",
            entry_count=len(entries),
            has_title=feed.title is not None,
            has_self_link=feed.self_link is not None,
        )
        return feed
