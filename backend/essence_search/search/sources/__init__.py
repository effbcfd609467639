"""Search sources: fetch request builders paired with extraction chains."""

from .base import FetchRequest, FetchResponse, Source, requests_fetch
from .duckduckgo import DuckDuckGoHtmlSource, DuckDuckGoMarkdownSource
from .structured import StructuredSource

__all__ = [
    "DuckDuckGoHtmlSource",
    "DuckDuckGoMarkdownSource",
    "FetchRequest",
    "FetchResponse",
    "Source",
    "StructuredSource",
    "requests_fetch",
]
