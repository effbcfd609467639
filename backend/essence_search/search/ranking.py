"""Relevance scoring for scraped results.

A cheap additive heuristic: enough to break ties between otherwise similar
snippets, not a calibrated model. Scores compare only within one query.
"""

from urllib.parse import urlparse

from essence_search.search.schemas import Result

WEIGHT_TITLE = 3.0
WEIGHT_SNIPPET = 1.5
WEIGHT_URL = 0.5

BONUS_EDU_GOV = 2.5
BONUS_ORG = 1.0
BONUS_HTTPS = 0.5


def _query_terms(query: str) -> list[str]:
    return [t for t in query.lower().split() if t]


def _domain_bonus(url: str) -> float:
    """Fixed authority bonus from the URL's host suffix and scheme."""
    try:
        parsed = urlparse(url.strip().lower())
        host = parsed.hostname or ""
        scheme = parsed.scheme
    except ValueError:
        return 0.0
    bonus = 0.0
    if host.endswith(".edu") or host.endswith(".gov"):
        bonus += BONUS_EDU_GOV
    if host.endswith(".org"):
        bonus += BONUS_ORG
    if scheme == "https":
        bonus += BONUS_HTTPS
    return bonus


def score_result(query: str, title: str, snippet: str, url: str) -> float:
    title_lower = (title or "").lower()
    snippet_lower = (snippet or "").lower()
    url_lower = (url or "").lower()
    score = 0.0
    for term in _query_terms(query or ""):
        if term in title_lower:
            score += WEIGHT_TITLE
        if term in snippet_lower:
            score += WEIGHT_SNIPPET
        if term in url_lower:
            score += WEIGHT_URL
    return score + _domain_bonus(url or "")


def sort_by_score(results: list[Result]) -> list[Result]:
    """Score descending; Python's sort is stable so ties keep extraction order."""
    return sorted(results, key=lambda r: r.score, reverse=True)
