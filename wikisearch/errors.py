"""Exception types raised by the search pipeline."""

from __future__ import annotations


class WikiSearchError(Exception):
    """Base class for all wikisearch errors."""


class SearchUnavailable(WikiSearchError):
    """The primary search lookup could not be performed.

    Raised for transport failures, non-2xx responses and unreadable bodies.
    Callers must show an error state and never render partial results.
    """


class SummaryUnavailable(WikiSearchError):
    """A per-article summary lookup failed.

    The orchestrator absorbs this and drops the affected hit.
    """
