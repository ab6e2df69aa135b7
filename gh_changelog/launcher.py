"""Open changelog entries in the system browser."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import EntryLookupError, LaunchError
from .models import FeedEntry

logger = logging.getLogger(__name__)

# Display IDs are printed as "#<index>"; the marker is optional on input.
ID_MARKER = "#"


def resolve_entry(entries: Sequence[FeedEntry], token: str) -> Tuple[int, FeedEntry]:
    """Map a display ID such as ``#3`` or ``3`` to its entry.

    IDs are positions in the current sorted listing, not stable identifiers.
    """
    raw = token.removeprefix(ID_MARKER)
    try:
        index = int(raw)
    except ValueError:
        raise EntryLookupError(f"Invalid ID: {raw}") from None

    if not entries:
        raise EntryLookupError("No entries available")
    if not 0 <= index < len(entries):
        raise EntryLookupError(
            f"ID {ID_MARKER}{index} is out of range (0-{len(entries) - 1})"
        )

    entry = entries[index]
    if not entry.link:
        raise EntryLookupError(f"No link available for item {ID_MARKER}{index}")
    return index, entry


def browser_command(url: str, platform: Optional[str] = None) -> List[str]:
    """Return the command that opens ``url`` with the platform's default handler."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", url]
    if platform.startswith("win"):
        return ["cmd", "/c", "start", "", url]
    return ["xdg-open", url]


def launch_url(url: str) -> None:
    """Start the default handler for ``url`` without waiting for it."""
    command = browser_command(url)
    logger.debug("Launching %s", command)
    try:
        subprocess.Popen(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
        )
    except OSError as exc:
        raise LaunchError(f"Failed to open browser: {exc}") from exc


def open_entry(
    entries: Sequence[FeedEntry],
    token: str,
    opener: Optional[Callable[[str], None]] = None,
) -> FeedEntry:
    """Resolve ``token`` and hand the entry's link to ``opener``."""
    index, entry = resolve_entry(entries, token)
    logger.info("Opening entry %s%d: %s", ID_MARKER, index, entry.link)
    (opener or launch_url)(entry.link)
    return entry
