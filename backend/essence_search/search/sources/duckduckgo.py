"""
DuckDuckGo sources: the no-JS HTML results page, and the same page rendered
to Markdown by a reader proxy (used when the HTML endpoint blocks us).
"""

from urllib.parse import quote

from essence_search.config import DEFAULT_USER_AGENT
from essence_search.search.extractors import extract_html, extract_markdown
from essence_search.search.schemas import Result
from essence_search.search.support import DEFAULT_REDIRECT_BASE
from essence_search.search.sources.base import DEFAULT_TIMEOUT_SECONDS, FetchRequest, Source

DEFAULT_HTML_SEARCH_URL = "https://html.duckduckgo.com/html/"
DEFAULT_READER_URL = "https://r.jina.ai/"


def html_search_url(query: str, search_url: str = DEFAULT_HTML_SEARCH_URL) -> str:
    return f"{search_url}?q={quote(query, safe='')}"


class DuckDuckGoHtmlSource(Source):
    name = "duckduckgo_html"

    def __init__(
        self,
        search_url: str = DEFAULT_HTML_SEARCH_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        redirect_base: str = DEFAULT_REDIRECT_BASE,
    ):
        super().__init__(timeout=timeout)
        self.search_url = search_url
        self.user_agent = user_agent
        self.redirect_base = redirect_base

    def build_request(self, query: str) -> FetchRequest:
        return FetchRequest(
            method="GET",
            url=html_search_url(query, self.search_url),
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
        )

    def extract(self, content: str, query: str) -> list[Result]:
        return extract_html(content, query, self.redirect_base)


class DuckDuckGoMarkdownSource(Source):
    name = "duckduckgo_markdown"

    def __init__(
        self,
        reader_url: str = DEFAULT_READER_URL,
        search_url: str = DEFAULT_HTML_SEARCH_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        redirect_base: str = DEFAULT_REDIRECT_BASE,
    ):
        super().__init__(timeout=timeout)
        self.reader_url = reader_url
        self.search_url = search_url
        self.redirect_base = redirect_base

    def build_request(self, query: str) -> FetchRequest:
        return FetchRequest(
            method="GET",
            url=self.reader_url + html_search_url(query, self.search_url),
            headers={"Accept": "text/plain"},
            timeout=self.timeout,
        )

    def extract(self, content: str, query: str) -> list[Result]:
        return extract_markdown(content, query, self.redirect_base)
