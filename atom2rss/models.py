"""Data models for the Atom to RSS converter."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AtomEntry:
    """Represents a single Atom entry as read from the source document."""

    title: str | None = None
    link_href: str | None = None
    author_name: str | None = None
    published: str | None = None  # raw timestamp text
    content: str | None = None  # inner markup, opaque


@dataclass(frozen=True)
class AtomFeed:
    """Read-only view over a parsed Atom feed."""

    title: str | None = None
    description: str | None = None
    updated: str | None = None  # raw timestamp text, copied verbatim
    self_link: str | None = None
    first_link: str | None = None
    author_name: str | None = None
    entries: tuple[AtomEntry, ...] = ()


@dataclass(frozen=True)
class RssItem:
    """Represents a single RSS 2.0 item.

    Every field holds XML content ready to be placed inside its element.
    """

    title: str = ""
    link: str = ""
    creator: str = ""
    pub_date: str = ""
    description: str = ""


@dataclass(frozen=True)
class RssChannel:
    """Represents the RSS 2.0 channel with its items in entry order."""

    title: str = ""
    description: str = ""
    pub_date: str = ""
    link: str = ""
    author: str = ""
    items: tuple[RssItem, ...] = field(default_factory=tuple)
