"""Feed retrieval, decoding and ordering."""

from __future__ import annotations

import logging
import xml.sax
from datetime import datetime, timezone
from typing import Any, Iterable, List

import feedparser
import requests

from .dates import parse_published
from .errors import FetchError, ParseError
from .models import FeedEntry

logger = logging.getLogger(__name__)

FEED_URL = "https://github.blog/changelog/feed/"
REQUEST_TIMEOUT = 10.0

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def fetch_feed_document(url: str = FEED_URL) -> bytes:
    """Download the raw feed document."""
    logger.info("Fetching changelog feed %s", url)
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Error fetching feed: {exc}") from exc

    content = response.content
    logger.debug("Received %d bytes from %s", len(content), url)
    return content


def parse_feed(document: bytes) -> List[FeedEntry]:
    """Decode an RSS document into entries ordered newest first."""
    parsed = feedparser.parse(
        document, sanitize_html=False, resolve_relative_uris=False
    )

    error = parsed.get("bozo_exception")
    if isinstance(error, xml.sax.SAXException):
        raise ParseError(f"Feed document is not well-formed: {error}")

    version = parsed.get("version") or ""
    if not version.startswith("rss"):
        raise ParseError(
            f"Feed document is not an RSS channel (detected {version or 'unknown format'!r})"
        )

    entries = [_entry_from_item(item) for item in parsed.entries]
    logger.info("Parsed %d entries from %s feed", len(entries), version)
    return sort_entries(entries)


def _entry_from_item(item: Any) -> FeedEntry:
    body = None
    content = item.get("content")
    if content:
        try:
            body = content[0].get("value") or None
        except (TypeError, KeyError, IndexError, AttributeError):
            body = None

    return FeedEntry(
        title=item.get("title") or "",
        published=item.get("published") or "",
        summary=item.get("summary") or "",
        link=item.get("link") or None,
        body=body,
    )


def _sort_key(entry: FeedEntry) -> datetime:
    return parse_published(entry.published) or _OLDEST


def sort_entries(entries: Iterable[FeedEntry]) -> List[FeedEntry]:
    """Return entries newest first.

    Entries with unparseable dates sort as the oldest possible value. The sort
    is stable, so ties keep their document order.
    """
    return sorted(entries, key=_sort_key, reverse=True)


def fetch_entries(url: str = FEED_URL) -> List[FeedEntry]:
    """Fetch and parse the feed at ``url``."""
    return parse_feed(fetch_feed_document(url))
