"""Exceptions reported to the operator."""

from __future__ import annotations


class ChangelogError(RuntimeError):
    """Base class for failures that end the current operation."""


class FetchError(ChangelogError):
    """The feed document could not be retrieved."""


class ParseError(ChangelogError):
    """The feed document is not a well-formed RSS channel."""


class EntryLookupError(ChangelogError, LookupError):
    """A display ID does not resolve to an openable entry."""


class LaunchError(ChangelogError):
    """The system opener could not be started."""
