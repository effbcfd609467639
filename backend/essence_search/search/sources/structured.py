"""
Pre-scored structured source: POST {"q": query} -> {"results": [{title, url, snippet, score}]}.

This is the JSON shape served by ``POST /api/v1/search``; scores from it are
trusted as-is.
"""

import json

from pydantic import ValidationError

from essence_search.search.errors import SourceUnavailable
from essence_search.search.schemas import Result
from essence_search.search.sources.base import DEFAULT_TIMEOUT_SECONDS, FetchRequest, Source


class StructuredSource(Source):
    name = "structured"

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        super().__init__(timeout=timeout)
        self.url = url

    def build_request(self, query: str) -> FetchRequest:
        return FetchRequest(
            method="POST",
            url=self.url,
            headers={"Content-Type": "application/json"},
            json_body={"q": query},
            timeout=self.timeout,
        )

    def extract(self, content: str, query: str) -> list[Result]:
        try:
            data = json.loads(content)
        except ValueError as e:
            raise SourceUnavailable(self.name, f"invalid JSON: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise SourceUnavailable(self.name, "response has no 'results' list")

        results = []
        for item in data["results"]:
            if not isinstance(item, dict):
                continue
            try:
                results.append(
                    Result(
                        title=item.get("title"),
                        url=item.get("url"),
                        snippet=item.get("snippet"),
                        score=item.get("score") or 0.0,
                    )
                )
            except ValidationError:
                continue
        return results
