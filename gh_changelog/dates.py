"""Publish date parsing and display helpers."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

# RSS pubDate with a numeric offset, e.g. "Mon, 02 Jan 2006 15:04:05 -0700".
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"

JUST_NOW_WINDOW = timedelta(minutes=60)


def parse_published(value: Optional[str]) -> Optional[datetime]:
    """Return a timezone-aware datetime, or None when the value is unparseable."""
    if not value:
        return None
    try:
        return datetime.strptime(value, RFC1123Z)
    except ValueError:
        logger.debug("Unparseable publish date %r", value)
        return None


def format_date(value: str) -> str:
    """Format a publish date as YYYY-MM-DD, passing unparseable input through."""
    published = parse_published(value)
    if published is None:
        return value
    return published.strftime("%Y-%m-%d")


def format_relative_date(value: str, now: Optional[datetime] = None) -> str:
    """Describe how long ago an entry was published.

    Day counts compare local calendar dates rather than 24 hour windows, so an
    entry from 23:00 yesterday and one from 01:00 yesterday are both
    "1 day ago". Unparseable input is returned unchanged.
    """
    published = parse_published(value)
    if published is None:
        return value

    local_now = (now or datetime.now()).astimezone()
    if local_now - published < JUST_NOW_WINDOW:
        return "Just now"

    days = (local_now.date() - published.astimezone().date()).days
    if days == 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"
