"""RSS 2.0 serialization of a finished channel value."""

from .models import RssChannel, RssItem

RSS_VERSION = "2.0"

NAMESPACES = (
    ("media", "http://search.yahoo.com/mrss/"),
    ("atom", "http://www.w3.org/2005/Atom"),
    ("dc", "http://purl.org/dc/elements/1.1/"),
)

CHANNEL_FIELDS = (
    ("title", "title"),
    ("description", "description"),
    ("pubDate", "pub_date"),
    ("link", "link"),
    ("author", "author"),
)

ITEM_FIELDS = (
    ("title", "title"),
    ("link", "link"),
    ("dc:creator", "creator"),
    ("pubDate", "pub_date"),
    ("description", "description"),
)


def _element(tag: str, content: str) -> str:
    # content is already XML; it is spliced in as is
    return f"<{tag}>{content}</{tag}>"


def _item(item: RssItem) -> str:
    fields = "".join(_element(tag, getattr(item, name)) for tag, name in ITEM_FIELDS)
    return f"<item>{fields}</item>"


def serialize_channel(channel: RssChannel) -> str:
    """Walk a channel value and emit unindented RSS 2.0 XML.

    Every field element is written even when its content is empty. Item
    order follows ``channel.items``.
    """
    declarations = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES)
    fields = "".join(
        _element(tag, getattr(channel, name)) for tag, name in CHANNEL_FIELDS
    )
    items = "".join(_item(item) for item in channel.items)
    return (
        f'<rss {declarations} version="{RSS_VERSION}">'
        f"<channel>{fields}{items}</channel>"
        "</rss>"
    )
