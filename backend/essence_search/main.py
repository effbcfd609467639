"""
Essence Search API: scrape, rank and return web results for a query.
"""

import asyncio
import threading

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from essence_search.config import get_settings
from essence_search.logging_config import configure_logging
from essence_search.search.errors import AllSourcesFailed, InvalidQuery, SearchCancelled
from essence_search.search.pipeline import build_orchestrator
from essence_search.search.schemas import SearchRequest, SearchResponse
from essence_search.search.sources.base import Fetch, requests_fetch

settings = get_settings()
configure_logging(debug_mode=settings.debug, level=settings.log_level)
logger = structlog.get_logger(__name__)

# How often a running search checks whether its caller went away
DISCONNECT_POLL_SECONDS = 0.2

# Non-standard "client closed request" status; the caller never reads it
CLIENT_CLOSED_REQUEST = 499

app = FastAPI(title="Essence Search", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


def get_fetch() -> Fetch:
    return requests_fetch


async def _watch_disconnect(request: Request, cancel_event: threading.Event) -> None:
    """Set ``cancel_event`` once the client disconnects; returns early if the event is set elsewhere."""
    while not cancel_event.is_set():
        if await request.is_disconnected():
            logger.info("search_client_disconnected", path=request.url.path)
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)


@app.post("/api/v1/search", response_model=SearchResponse)
async def search(body: SearchRequest, request: Request, fetch: Fetch = Depends(get_fetch)):
    """
    Scrape DuckDuckGo for ``q`` and return scored results, best first.

    Returns: {"results": [{title, url, snippet, score}], "source": name | null}.
    An empty ``results`` list means no results were found. A client that
    disconnects mid-search cancels it before the next source is contacted.
    """
    # This endpoint is the structured source for other callers; never chain into it
    orchestrator = build_orchestrator(settings, fetch, include_structured=False)
    cancel_event = threading.Event()
    watcher = asyncio.create_task(_watch_disconnect(request, cancel_event))
    try:
        outcome = await run_in_threadpool(orchestrator.run, body.q, cancel_event)
    except InvalidQuery as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AllSourcesFailed as e:
        raise HTTPException(status_code=503, detail=str(e))
    except SearchCancelled as e:
        raise HTTPException(status_code=CLIENT_CLOSED_REQUEST, detail=str(e))
    finally:
        # Stops the watcher loop as well as the task
        cancel_event.set()
        watcher.cancel()
    return SearchResponse(results=outcome.results, source=outcome.source)
