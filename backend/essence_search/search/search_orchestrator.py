"""
Search orchestrator: try sources in priority order, stop at the first one that
yields results, then dedupe and rank.

Sources are tried strictly one at a time; the first source with results wins
and the rest are never contacted.
"""

import threading
from typing import Optional, Sequence

import structlog

from essence_search.search.errors import (
    AllSourcesFailed,
    InvalidQuery,
    SearchCancelled,
    SourceUnavailable,
)
from essence_search.search.ranking import sort_by_score
from essence_search.search.schemas import Result, SearchOutcome, SourceAttempt
from essence_search.search.sources.base import FETCH_ERRORS, Fetch, Source, requests_fetch

logger = structlog.get_logger(__name__)


def dedupe_results(results: list[Result]) -> list[Result]:
    """First occurrence wins by exact URL; order of first occurrences is kept."""
    seen_urls = set()
    deduplicated = []
    for result in results:
        if result.url not in seen_urls:
            seen_urls.add(result.url)
            deduplicated.append(result)
    return deduplicated


def validate_query(query: Optional[str]) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidQuery("Missing query 'q'")
    return query.strip()


class SearchOrchestrator:
    """Fallback chain over ``sources``. Holds no per-query state, so one instance serves concurrent callers."""

    def __init__(self, sources: Sequence[Source], fetch: Fetch = requests_fetch):
        self.sources = tuple(sources)
        self.fetch = fetch

    def search(self, query: str, cancel_event: Optional[threading.Event] = None) -> list[Result]:
        return self.run(query, cancel_event=cancel_event).results

    def run(self, query: str, cancel_event: Optional[threading.Event] = None) -> SearchOutcome:
        """
        Evaluate ``query`` against the source chain.

        Raises:
            InvalidQuery: empty or whitespace-only query (no source contacted).
            AllSourcesFailed: every source was unavailable.
            SearchCancelled: ``cancel_event`` was set during the evaluation.

        An outcome with ``state="exhausted"`` and no results is a normal
        "no results found" answer.
        """
        query = validate_query(query)
        attempts: list[SourceAttempt] = []
        failures: list[SourceUnavailable] = []

        for source in self.sources:
            self._check_cancelled(cancel_event, query)
            logger.debug("search_source_trying", source=source.name, query=query)
            try:
                results = self._try_source(source, query, cancel_event)
            except SourceUnavailable as e:
                logger.warning("search_source_failed", source=source.name, reason=e.reason)
                failures.append(e)
                attempts.append(SourceAttempt(source=source.name, status="failed", error=e.reason))
                continue

            if not results:
                logger.info("search_source_empty", source=source.name, query=query)
                attempts.append(SourceAttempt(source=source.name, status="empty"))
                continue

            ranked = sort_by_score(dedupe_results(results))
            attempts.append(
                SourceAttempt(source=source.name, status="succeeded", result_count=len(ranked))
            )
            logger.info("search_succeeded", source=source.name, query=query, result_count=len(ranked))
            return SearchOutcome(
                query=query,
                results=ranked,
                state="succeeded",
                source=source.name,
                attempts=attempts,
            )

        if len(failures) == len(self.sources):
            raise AllSourcesFailed(failures)

        logger.info("search_exhausted", query=query, attempts=len(attempts))
        return SearchOutcome(query=query, results=[], state="exhausted", attempts=attempts)

    def _try_source(
        self,
        source: Source,
        query: str,
        cancel_event: Optional[threading.Event],
    ) -> list[Result]:
        request = source.build_request(query)
        try:
            response = self.fetch(request)
        except FETCH_ERRORS as e:
            self._check_cancelled(cancel_event, query)
            raise SourceUnavailable(source.name, f"request failed: {e}") from e
        self._check_cancelled(cancel_event, query)

        if not response.ok:
            raise SourceUnavailable(source.name, f"HTTP {response.status_code}")
        return source.extract(response.text, query)

    @staticmethod
    def _check_cancelled(cancel_event: Optional[threading.Event], query: str) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.info("search_cancelled", query=query)
            raise SearchCancelled(f"Search for '{query}' was cancelled")
