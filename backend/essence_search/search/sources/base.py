"""
Source abstraction: how to fetch one rendering of the results page and which
extraction chain turns it into results.

Network access is injected as a ``Fetch`` callable so the orchestrator can be
driven by canned responses. ``requests_fetch`` is the default; it reuses a
single ``requests.Session`` for connection pooling.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import requests

from essence_search.search.schemas import Result

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json_body: Optional[dict[str, Any]] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class FetchResponse:
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


Fetch = Callable[[FetchRequest], FetchResponse]

# Errors a fetch may raise that mean "this source is unavailable"
FETCH_ERRORS = (requests.exceptions.RequestException, OSError)

_session: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def requests_fetch(request: FetchRequest) -> FetchResponse:
    """Perform ``request`` over HTTP. Transport errors and timeouts propagate."""
    response = _get_session().request(
        request.method,
        request.url,
        params=request.params or None,
        headers=request.headers or None,
        json=request.json_body,
        timeout=request.timeout,
    )
    return FetchResponse(status_code=response.status_code, text=response.text)


class Source(ABC):
    """One entry of the fallback chain. Holds configuration only, no per-query state."""

    name: str = "source"

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.timeout = timeout

    @abstractmethod
    def build_request(self, query: str) -> FetchRequest:
        ...

    @abstractmethod
    def extract(self, content: str, query: str) -> list[Result]:
        """Turn a successful response body into results (may be empty).

        Raises SourceUnavailable when the body is unusable as a whole.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
