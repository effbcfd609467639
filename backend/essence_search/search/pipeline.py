"""
Search pipeline: settings -> source chain -> orchestrator.

Orchestrates: structured JSON source (when configured) -> DuckDuckGo HTML
(block extractor, anchor fallback) -> DuckDuckGo Markdown via reader proxy
(redirect links + generic links) -> dedupe -> rank.
Single entry point: run_search(query).
"""

from typing import Optional

from essence_search.config import Settings, get_settings
from essence_search.search.schemas import Result
from essence_search.search.search_orchestrator import SearchOrchestrator
from essence_search.search.sources import (
    DuckDuckGoHtmlSource,
    DuckDuckGoMarkdownSource,
    Source,
    StructuredSource,
    requests_fetch,
)
from essence_search.search.sources.base import Fetch


def build_default_sources(settings: Settings, include_structured: bool = True) -> list[Source]:
    """Priority-ordered sources for ``settings``.

    ``include_structured=False`` is used by the HTTP API, which serves the
    structured shape itself and must not call back into itself.
    """
    timeout = settings.request_timeout_seconds
    sources: list[Source] = []
    if include_structured and settings.structured_search_url:
        sources.append(StructuredSource(settings.structured_search_url, timeout=timeout))
    sources.append(
        DuckDuckGoHtmlSource(
            search_url=settings.html_search_url,
            user_agent=settings.user_agent,
            timeout=timeout,
            redirect_base=settings.redirect_base_url,
        )
    )
    if settings.enable_markdown_source and settings.markdown_reader_url:
        sources.append(
            DuckDuckGoMarkdownSource(
                reader_url=settings.markdown_reader_url,
                search_url=settings.html_search_url,
                timeout=timeout,
                redirect_base=settings.redirect_base_url,
            )
        )
    return sources


def build_orchestrator(
    settings: Optional[Settings] = None,
    fetch: Optional[Fetch] = None,
    *,
    include_structured: bool = True,
) -> SearchOrchestrator:
    settings = settings or get_settings()
    return SearchOrchestrator(
        build_default_sources(settings, include_structured=include_structured),
        fetch=fetch or requests_fetch,
    )


def run_search(
    query: str,
    settings: Optional[Settings] = None,
    fetch: Optional[Fetch] = None,
) -> list[Result]:
    """
    Run the full chain for ``query`` and return results, score descending.

    Args:
        query: Free-text query; empty/whitespace raises InvalidQuery.
        settings: Defaults to get_settings() (env / .env).
        fetch: Network capability; defaults to requests_fetch.

    Returns:
        Deduplicated results, possibly empty ("no results found").
    """
    return build_orchestrator(settings, fetch).search(query)
