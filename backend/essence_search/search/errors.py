"""Errors raised by the search pipeline.

Only ``InvalidQuery``, ``AllSourcesFailed`` and ``SearchCancelled`` ever reach
the caller; ``SourceUnavailable`` is recovered by moving to the next source.
An empty result list is not an error.
"""


class SearchError(Exception):
    """Base class for search pipeline errors."""


class InvalidQuery(SearchError, ValueError):
    """Raised for an empty or whitespace-only query, before any source is contacted."""


class SourceUnavailable(SearchError):
    """Raised when one source cannot be fetched or returns an unusable response."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class AllSourcesFailed(SearchError):
    """Raised when every source in the chain was unavailable."""

    def __init__(self, failures: list[SourceUnavailable]):
        details = "; ".join(str(f) for f in failures) or "no sources configured"
        super().__init__(f"All search sources failed ({details})")
        self.failures = failures


class SearchCancelled(SearchError):
    """Raised when the caller cancels a query evaluation."""
