"""Publication date normalization for RSS items."""

from datetime import datetime, tzinfo

from dateutil import parser as date_parser
from dateutil import tz

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Two fixed fallbacks that differ in year, month and day. A timestamp parsing
# differently against each one lacks a calendar date of its own.
DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def resolve_timezone(name: str) -> tzinfo:
    """Return the tzinfo for ``name``, raising ValueError when unknown."""
    zone = tz.UTC if name.upper() == "UTC" else tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown time zone: {name!r}")
    return zone


def format_pub_date(published: str | None, zone: tzinfo = tz.UTC) -> str:
    """Render a raw Atom timestamp as a human-readable RSS date.

    The output looks like ``Tue, Jan 02, 2024, 03:04:05 PM UTC``. Names are
    fixed English abbreviations regardless of the process locale. Naive
    timestamps are taken to be in ``zone``.

    Returns an empty string when ``published`` is absent, unparseable or
    missing part of its calendar date, so the result never depends on the
    current day.
    """
    if not published or not published.strip():
        return ""

    try:
        parsed, check = (
            date_parser.parse(published.strip(), default=default)
            for default in DATE_DEFAULTS
        )
        if parsed != check:
            return ""
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=zone)
        local = parsed.astimezone(zone)
    except (ValueError, OverflowError):
        return ""

    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    zone_name = local.tzname() or ""

    formatted = (
        f"{WEEKDAYS[local.weekday()]}, {MONTHS[local.month - 1]} {local.day:02d}, "
        f"{local.year}, {hour:02d}:{local.minute:02d}:{local.second:02d} {meridiem} "
        f"{zone_name}"
    )
    return formatted.rstrip()
