"""Pytest fixtures: canned DuckDuckGo pages and a fake fetch capability."""

import pytest
import requests

from essence_search.config import Settings
from essence_search.search.sources.base import FetchRequest, FetchResponse

HTML_SEARCH_URL = "https://html.duckduckgo.com/html/"
READER_URL = "https://r.jina.ai/"
STRUCTURED_URL = "https://search.example.test/api/v1/search"


class FakeFetch:
    """Routes requests by URL prefix to a canned response or a raised exception."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.requests: list[FetchRequest] = []

    def __call__(self, request: FetchRequest) -> FetchResponse:
        self.requests.append(request)
        for prefix, outcome in self.routes.items():
            if request.url.startswith(prefix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise requests.exceptions.ConnectionError(f"no route for {request.url}")

    @property
    def urls(self) -> list[str]:
        return [r.url for r in self.requests]


@pytest.fixture
def make_fetch():
    return FakeFetch


@pytest.fixture
def settings():
    return Settings(
        structured_search_url="",
        html_search_url=HTML_SEARCH_URL,
        markdown_reader_url=READER_URL,
        enable_markdown_source=True,
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def settings_with_structured(settings):
    return settings.model_copy(update={"structured_search_url": STRUCTURED_URL})


@pytest.fixture
def ddg_html():
    """Results page for "rust": three results, a duplicate, and a block without an anchor."""
    return """<!DOCTYPE html>
<html><head><title>rust at DuckDuckGo</title></head>
<body>
<div class="serp__results">
<div class="result results_links results_links_deep web-result ">
  <div class="links_main links_deep result__body">
    <h2 class="result__title">
      <a rel="nofollow" class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F&amp;rut=abc">The <b>Rust</b> Programming Language</a>
    </h2>
    <a class="result__snippet" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F">A language empowering everyone
      to build reliable and efficient software. <b>Rust</b></a>
  </div>
</div>
<div class="result results_links results_links_deep web-result ">
  <div class="links_main links_deep result__body">
    <h2 class="result__title">
      <a rel="nofollow" class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fen.wikipedia.org%2Fwiki%2FRust_(programming_language)&amp;rut=def">Rust (programming language) - Wikipedia</a>
    </h2>
    <a class="result__snippet js-result-snippet" href="#"><b>Rust</b> is a general-purpose programming language.</a>
  </div>
</div>
<div class="result--more">
  <form action="/html/" method="post"><input type="submit" class="btn" value="Next"></form>
</div>
<div class="result results_links web-result ">
  <div class="links_main result__body">
    <h2 class="result__title">
      <a rel="nofollow" class="result__a" href="http://foundation.rust-lang.org/">Rust Foundation</a>
    </h2>
    <div dir="ltr" class="result__snippet">The <b>Rust</b> Foundation is an independent non-profit.</div>
  </div>
</div>
<div class="result results_links web-result ">
  <div class="links_main result__body">
    <h2 class="result__title">
      <a rel="nofollow" class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F&amp;rut=xyz">Rust again</a>
    </h2>
  </div>
</div>
</div>
</body></html>
"""


@pytest.fixture
def ddg_html_drifted():
    """Primary anchors wrap a div whose class starts like a block marker, so blocks split mid-anchor."""
    return """<html><body>
<section>
  <a class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fdocs.python.org%2F3%2F"><div class="result-title">Python 3 docs</div></a>
  <a class="result__a" href="https://www.python.org/"><div class="result-title">Welcome to Python.org</div></a>
</section>
</body></html>
"""


@pytest.fixture
def ddg_html_empty():
    return "<html><body><div class=\"no-results\">No results found for <b>x</b>.</div></body></html>"


@pytest.fixture
def ddg_markdown():
    """Reader rendering with one redirect link, one allowed generic link, and engine noise."""
    return """Title: rust at DuckDuckGo

URL Source: https://html.duckduckgo.com/html/?q=rust

Markdown Content:
[![DuckDuckGo](https://duckduckgo.com/assets/logo_homepage.normal.v109.svg)](https://duckduckgo.com/html/)

## [The Rust Programming Language](https://duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F&rut=abc123)

![Image 1](https://external-content.duckduckgo.com/ip3/www.rust-lang.org.ico)

[Rust by Example](https://doc.rust-lang.org/rust-by-example/)

[Feedback](https://duckduckgo.com/feedback.html)
"""
