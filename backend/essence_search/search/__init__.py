"""Search: extraction-and-ranking pipeline over scraped result pages."""

from .errors import AllSourcesFailed, InvalidQuery, SearchCancelled, SearchError, SourceUnavailable
from .extractors import (
    extract_html,
    extract_html_anchors,
    extract_html_blocks,
    extract_markdown,
    extract_markdown_links,
    extract_markdown_redirect_links,
)
from .pipeline import build_default_sources, build_orchestrator, run_search
from .ranking import score_result, sort_by_score
from .schemas import Result, SearchOutcome, SourceAttempt
from .search_orchestrator import SearchOrchestrator, dedupe_results
from .support import resolve_url, sanitize

__all__ = [
    "AllSourcesFailed",
    "InvalidQuery",
    "SearchCancelled",
    "SearchError",
    "SourceUnavailable",
    "extract_html",
    "extract_html_anchors",
    "extract_html_blocks",
    "extract_markdown",
    "extract_markdown_links",
    "extract_markdown_redirect_links",
    "build_default_sources",
    "build_orchestrator",
    "run_search",
    "score_result",
    "sort_by_score",
    "Result",
    "SearchOutcome",
    "SourceAttempt",
    "SearchOrchestrator",
    "dedupe_results",
    "resolve_url",
    "sanitize",
]
