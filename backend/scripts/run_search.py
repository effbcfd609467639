"""
Run a search from the command line and print ranked results.

Run from backend with:
  python scripts/run_search.py "Your search query here"
  python scripts/run_search.py --debug "rust borrow checker"

Settings come from ESSENCE_* env vars (or .env). Prints the source attempts,
then the ranked results with host and score.
"""

import os
import sys
from textwrap import shorten

# Add backend root so "essence_search" is importable from scripts/ or from backend/
_backend_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _backend_root not in sys.path:
    sys.path.insert(0, _backend_root)

from essence_search.config import get_settings
from essence_search.logging_config import configure_logging
from essence_search.search.errors import SearchError
from essence_search.search.pipeline import build_orchestrator


def _trunc(s: str, max_len: int = 72) -> str:
    return shorten(s, width=max_len, placeholder="…") if s else ""


def _section(title: str) -> None:
    print()
    print("=" * 80)
    print(f"  {title}")
    print("=" * 80)


def main() -> None:
    args = sys.argv[1:]
    debug = "--debug" in args
    query = " ".join(a for a in args if a != "--debug")

    settings = get_settings()
    configure_logging(debug_mode=debug or settings.debug, level=settings.log_level)

    try:
        outcome = build_orchestrator(settings).run(query)
    except SearchError as e:
        print(f"Search failed: {e}")
        sys.exit(1)

    _section(f"Sources for: {outcome.query}")
    for attempt in outcome.attempts:
        detail = attempt.error or f"{attempt.result_count} results"
        print(f"  {attempt.source:<22} {attempt.status:<10} {detail}")

    if not outcome.results:
        print("\nNo results. Try different keywords.")
        return

    _section(f"Results ({len(outcome.results)}) from {outcome.source}")
    print(f"{'#':>3}  {'score':>5}  {'host':<28}  title")
    print("-" * 80)
    for i, r in enumerate(outcome.results, 1):
        print(f"{i:>3}  {r.score:>5.1f}  {_trunc(r.host, 28):<28}  {_trunc(r.title, 36)}")
        print(f"{'':>13}{r.url}")
        if r.snippet:
            print(f"{'':>13}{_trunc(r.snippet, 66)}")


if __name__ == "__main__":
    main()
