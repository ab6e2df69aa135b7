"""Shared data models for gh_changelog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FeedEntry:
    """Single changelog item as published in the feed."""

    title: str
    published: str
    summary: str = ""
    link: Optional[str] = None
    body: Optional[str] = None
