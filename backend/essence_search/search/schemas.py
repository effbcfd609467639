from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class Result(BaseModel):
    title: str = ""
    url: str
    snippet: str = ""
    score: float = Field(default=0.0, allow_inf_nan=False)

    @field_validator("title", "snippet", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        # Empty string is the canonical "missing" value
        return "" if value is None else value

    @property
    def host(self) -> str:
        try:
            return urlparse(self.url).hostname or self.url
        except ValueError:
            return self.url


class SourceAttempt(BaseModel):
    """Outcome of contacting one source during a query evaluation."""

    source: str
    status: Literal["failed", "empty", "succeeded"]
    result_count: int = 0
    error: Optional[str] = None


class SearchOutcome(BaseModel):
    query: str
    results: list[Result] = Field(default_factory=list)
    state: Literal["succeeded", "exhausted"]
    source: Optional[str] = Field(default=None, description="Source that produced the results")
    attempts: list[SourceAttempt] = Field(default_factory=list)


class SearchRequest(BaseModel):
    q: str = ""


class SearchResponse(BaseModel):
    results: list[Result]
    source: Optional[str] = None
