"""
Extraction strategies: raw DuckDuckGo markup -> scored Result candidates.

Each strategy is a pure transform ``(raw_content, query) -> list[Result]``.
None of them raise on unexpected markup; blocks or links that do not match
are skipped. Picking and chaining strategies is the source's job.

``base`` is the origin relative redirect links (``/l/?uddg=...``) resolve against.
"""

import html
import re
from urllib.parse import urlparse

from essence_search.search.ranking import score_result
from essence_search.search.schemas import Result
from essence_search.search.support import DEFAULT_REDIRECT_BASE, resolve_url, sanitize

# ----- HTML (html.duckduckgo.com) -----

RESULT_BLOCK_MARKER = '<div class="result'

_PRIMARY_ANCHOR = r'<a[^>]*class="[^"]*result__a[^"]*"[^>]*href="([^"]+)"[^>]*>([\s\S]*?)</a>'
PRIMARY_ANCHOR_RE = re.compile(_PRIMARY_ANCHOR, re.IGNORECASE)

# Snippet is either an <a> or a <div>, class "result__snippet" (sometimes with js-result-snippet)
SNIPPET_RE = re.compile(
    r'<a[^>]*class="[^"]*result__snippet[^"]*"[^>]*>([\s\S]*?)</a>'
    r'|<div[^>]*class="[^"]*result__snippet[^"]*"[^>]*>([\s\S]*?)</div>',
    re.IGNORECASE,
)

# ----- Markdown (reader-proxy rendering of the same page) -----

# One link-target character, or a single level of balanced parentheses (Wikipedia-style titles)
_TARGET_CHAR = r"(?:[^()\s]|\([^()\s]*\))"

REDIRECT_LINK_RE = re.compile(
    r"\[([^\]]*)\]\("
    r"((?:https?:)?(?://[^/\s()]*duckduckgo\.com)?/l/\?" + _TARGET_CHAR + r"*uddg=" + _TARGET_CHAR + r"+)"
    r"\)",
    re.IGNORECASE,
)

MARKDOWN_LINK_RE = re.compile(
    r"(!?)\[([^\]]*)\]\((https?://" + _TARGET_CHAR + r'+)(?:\s+"[^"]*")?\)'
)

# Engine assets, tracking and internal search pages, plus the reader proxy itself
DENIED_HOST_SUBSTRINGS = ("duckduckgo.com", "duck.com", "duck.co", "jina.ai")


def _build_result(
    query: str,
    href: str,
    title_html: str,
    snippet_html: str = "",
    base: str = DEFAULT_REDIRECT_BASE,
) -> Result:
    # Markup keeps entities (&amp; in hrefs, &#x27; in titles); decode before stripping tags
    url = resolve_url(html.unescape(href), base)
    title = sanitize(html.unescape(title_html))
    snippet = sanitize(html.unescape(snippet_html))
    return Result(
        title=title,
        url=url,
        snippet=snippet,
        score=score_result(query, title, snippet, url),
    )


def extract_html_blocks(raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE) -> list[Result]:
    """One result per ``result`` block; blocks without a primary anchor (ads, nav) are skipped."""
    results = []
    for block in (raw_content or "").split(RESULT_BLOCK_MARKER):
        anchor = PRIMARY_ANCHOR_RE.search(block)
        if not anchor:
            continue
        snippet_match = SNIPPET_RE.search(block)
        snippet_html = ""
        if snippet_match:
            snippet_html = snippet_match.group(1) or snippet_match.group(2) or ""
        results.append(_build_result(query, anchor.group(1), anchor.group(2), snippet_html, base))
    return results


def extract_html_anchors(raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE) -> list[Result]:
    """Last resort when block markup drifted: every primary anchor in the document, no snippets."""
    return [
        _build_result(query, match.group(1), match.group(2), base=base)
        for match in PRIMARY_ANCHOR_RE.finditer(raw_content or "")
    ]


def extract_markdown_redirect_links(
    raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE
) -> list[Result]:
    return [
        _build_result(query, match.group(2), match.group(1), base=base)
        for match in REDIRECT_LINK_RE.finditer(raw_content or "")
    ]


def _is_denied_host(url: str) -> bool:
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return True
    return any(denied in host for denied in DENIED_HOST_SUBSTRINGS)


def extract_markdown_links(raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE) -> list[Result]:
    """Generic ``[text](url)`` links, skipping images and the engine's own hosts.

    First-seen URL wins within this pass.
    """
    results = []
    seen: set[str] = set()
    for line in (raw_content or "").splitlines():
        for match in MARKDOWN_LINK_RE.finditer(line):
            if match.group(1) == "!":
                continue
            href = match.group(3)
            if _is_denied_host(href):
                continue
            result = _build_result(query, href, match.group(2), base=base)
            if result.url in seen:
                continue
            seen.add(result.url)
            results.append(result)
    return results


def extract_html(raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE) -> list[Result]:
    """HTML chain: block extractor, then the anchor scan only if blocks yielded nothing."""
    results = extract_html_blocks(raw_content, query, base)
    if not results:
        results = extract_html_anchors(raw_content, query, base)
    return results


def extract_markdown(raw_content: str, query: str, base: str = DEFAULT_REDIRECT_BASE) -> list[Result]:
    """Markdown chain: redirect links first, then generic links; dedupe happens later."""
    return extract_markdown_redirect_links(raw_content, query, base) + extract_markdown_links(
        raw_content, query, base
    )
