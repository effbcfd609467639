"""Tests for search.pipeline: settings -> source chain wiring."""

from essence_search.search.pipeline import build_default_sources, build_orchestrator, run_search
from essence_search.search.sources import DuckDuckGoHtmlSource, DuckDuckGoMarkdownSource, StructuredSource
from essence_search.search.sources.base import FetchResponse


class TestBuildDefaultSources:
    def test_without_structured_url(self, settings):
        sources = build_default_sources(settings)
        assert [type(s) for s in sources] == [DuckDuckGoHtmlSource, DuckDuckGoMarkdownSource]

    def test_structured_first_when_configured(self, settings_with_structured):
        sources = build_default_sources(settings_with_structured)
        assert [s.name for s in sources] == ["structured", "duckduckgo_html", "duckduckgo_markdown"]
        assert isinstance(sources[0], StructuredSource)

    def test_structured_excluded_on_request(self, settings_with_structured):
        sources = build_default_sources(settings_with_structured, include_structured=False)
        assert [s.name for s in sources] == ["duckduckgo_html", "duckduckgo_markdown"]

    def test_markdown_source_can_be_disabled(self, settings):
        disabled = settings.model_copy(update={"enable_markdown_source": False})
        assert [s.name for s in build_default_sources(disabled)] == ["duckduckgo_html"]

    def test_timeout_propagates(self, settings):
        assert all(s.timeout == 5.0 for s in build_default_sources(settings))

    def test_redirect_base_propagates(self, settings):
        mirrored = settings.model_copy(update={"redirect_base_url": "https://mirror.example"})
        assert [s.redirect_base for s in build_default_sources(mirrored)] == [
            "https://mirror.example",
            "https://mirror.example",
        ]


class TestRunSearch:
    def test_uses_injected_fetch(self, settings, make_fetch, ddg_html):
        fetch = make_fetch({"https://html.duckduckgo.com/html/": FetchResponse(200, ddg_html)})
        results = run_search("rust", settings=settings, fetch=fetch)
        assert results[0].url == "https://en.wikipedia.org/wiki/Rust_(programming_language)"
        assert len(fetch.requests) == 1

    def test_orchestrator_is_reusable(self, settings, make_fetch, ddg_html):
        fetch = make_fetch({"https://html.duckduckgo.com/html/": FetchResponse(200, ddg_html)})
        orchestrator = build_orchestrator(settings, fetch)
        assert orchestrator.search("rust") == orchestrator.search("rust")

    def test_relative_links_resolve_against_configured_base(self, settings, make_fetch):
        mirrored = settings.model_copy(update={"redirect_base_url": "https://mirror.example"})
        page = '<div class="result"><a class="result__a" href="/about">About</a></div>'
        fetch = make_fetch({"https://html.duckduckgo.com/html/": FetchResponse(200, page)})
        results = run_search("about", settings=mirrored, fetch=fetch)
        assert [r.url for r in results] == ["https://mirror.example/about"]
