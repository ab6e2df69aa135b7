"""Rendering helpers for changelog listings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from .dates import format_date, format_relative_date
from .html_text import html_to_text
from .launcher import ID_MARKER
from .models import FeedEntry
from .templating import get_environment

logger = logging.getLogger(__name__)

ID_WIDTH = 6
TITLE_WIDTH = 90
ELLIPSIS = "..."
RULE = "-" * 40


@dataclass
class CompactRow:
    label: str
    title: str
    updated: str


@dataclass
class VerboseSection:
    heading: str
    text: str


def truncate_title(title: str, width: int = TITLE_WIDTH) -> str:
    """Limit a title to ``width`` characters, marking the cut with an ellipsis."""
    if len(title) <= width:
        return title
    return title[: width - len(ELLIPSIS)] + ELLIPSIS


def entry_text(entry: FeedEntry) -> str:
    """Plain text of the entry's rich body, or of its summary when it has none."""
    if entry.body is not None:
        return html_to_text(entry.body)
    return html_to_text(entry.summary)


def build_compact_text(
    entries: Sequence[FeedEntry],
    color: bool = False,
    title_width: int = TITLE_WIDTH,
    now: Optional[datetime] = None,
) -> str:
    """Render one row per entry: display ID, title and relative date."""
    rows = [
        CompactRow(
            label=f"{ID_MARKER}{index}",
            title=truncate_title(entry.title, title_width),
            updated=format_relative_date(entry.published, now=now),
        )
        for index, entry in enumerate(entries)
    ]
    template = get_environment().get_template("compact.txt.j2")
    logger.debug("Rendering %d entries in compact mode", len(rows))
    return template.render(
        rows=rows, color=color, id_width=ID_WIDTH, title_width=title_width
    )


def build_verbose_text(entries: Sequence[FeedEntry]) -> str:
    """Render every entry with its date, title and full plain-text body."""
    sections = [
        VerboseSection(
            heading=f"{format_date(entry.published)} - {entry.title}",
            text=entry_text(entry),
        )
        for entry in entries
    ]
    template = get_environment().get_template("verbose.txt.j2")
    logger.debug("Rendering %d entries in verbose mode", len(sections))
    return template.render(sections=sections, rule=RULE)


def render_entries(
    entries: Sequence[FeedEntry], pretty: bool = False, **options: Any
) -> str:
    """Render entries in verbose mode when ``pretty`` is set, compact otherwise."""
    if pretty:
        return build_verbose_text(entries)
    return build_compact_text(entries, **options)
