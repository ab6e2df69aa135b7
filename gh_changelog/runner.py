"""High-level orchestration for gh_changelog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .feeds import FEED_URL, fetch_entries
from .launcher import open_entry
from .models import FeedEntry
from .renderers import TITLE_WIDTH, render_entries

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Runtime options for executing the application."""

    feed_url: str = FEED_URL
    pretty: bool = False
    open_id: Optional[str] = None
    title_width: int = TITLE_WIDTH
    color: bool = False


@dataclass
class RunResult:
    """Returned data after executing the app."""

    output_text: str
    opened: Optional[FeedEntry] = None


def execute(config: RunConfig) -> RunResult:
    """Fetch the feed, then either open the requested entry or render the listing."""
    entries = fetch_entries(config.feed_url)

    if config.open_id is not None:
        entry = open_entry(entries, config.open_id)
        return RunResult(output_text=f"Opening: {entry.title}\n", opened=entry)

    if config.pretty:
        output = render_entries(entries, pretty=True)
    else:
        output = render_entries(
            entries, color=config.color, title_width=config.title_width
        )
    logger.info("Rendered %d entries", len(entries))
    return RunResult(output_text=output)
