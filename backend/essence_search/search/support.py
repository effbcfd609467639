"""
Search support: redirect URL resolving and markup sanitizing in one module.

Both helpers are fail-open: scraped markup is expected to be imperfect, so a
malformed link comes back as-is and a fragment always yields a string.
"""

import re
from urllib.parse import parse_qs, urljoin, urlparse

DEFAULT_REDIRECT_BASE = "https://duckduckgo.com"

# DuckDuckGo wraps outbound links like /l/?kh=-1&uddg=https%3A%2F%2Fexample.com
REDIRECT_PARAM = "uddg"

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def resolve_url(href: str, base: str = DEFAULT_REDIRECT_BASE) -> str:
    """Return the real destination of ``href``, unwrapping redirect links."""
    try:
        absolute = urljoin(base, href)
        params = parse_qs(urlparse(absolute).query)
        destination = params.get(REDIRECT_PARAM)
        if destination and destination[0]:
            # parse_qs already percent-decodes the value
            return destination[0]
        return absolute
    except (TypeError, ValueError, AttributeError):
        return href


def sanitize(fragment: str) -> str:
    """Strip tags, collapse whitespace, trim."""
    text = _TAG_RE.sub("", fragment or "")
    # Unbalanced brackets survive tag removal
    text = text.replace("<", "").replace(">", "")
    return _WHITESPACE_RE.sub(" ", text).strip()
