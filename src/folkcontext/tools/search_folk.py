"""Tool handler for search_folk.

Searches the link text of three index pages (the main folk index, the Child
Ballad index and the Laws index) and returns the merged hits as text.
No MCP or FastMCP imports; server.py handles the MCP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.config import (
    CHILD_INDEX_PATH,
    FOLK_INDEX_PATH,
    LAWS_INDEX_PATH,
    SONGS_DIR_PATH,
)
from folkcontext.errors import ErrorCode, FolkContextError
from folkcontext.extractor import extract_search_hits, merge_search_hits
from folkcontext.models.tools import SearchFolkInput

if TYPE_CHECKING:
    from folkcontext.models.records import SearchResult
    from folkcontext.state import AppState


async def handle(query: str, state: AppState) -> str:
    """Handle a search_folk tool call."""
    log = structlog.get_logger().bind(tool="search_folk", query=query)
    log.info("handler_called")

    try:
        validated = SearchFolkInput(query=query)
    except ValueError as exc:
        raise FolkContextError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Provide a non-empty artist, song title or ballad number (max 500 chars).",
            recoverable=False,
        ) from exc

    if state.fetcher is None:
        raise RuntimeError("Fetcher not initialized")

    index_doc = await state.fetcher.fetch(FOLK_INDEX_PATH)
    index_hits = extract_search_hits(index_doc, FOLK_INDEX_PATH, validated.query)

    child_doc = await state.fetcher.fetch(CHILD_INDEX_PATH)
    child_hits = extract_search_hits(
        child_doc, SONGS_DIR_PATH, validated.query, kind="Child Ballad"
    )

    laws_doc = await state.fetcher.fetch(LAWS_INDEX_PATH)
    laws_hits = extract_search_hits(laws_doc, SONGS_DIR_PATH, validated.query, kind="Laws Index")

    results = merge_search_hits(index_hits, child_hits, laws_hits)
    log.info("search_complete", result_count=len(results))

    if not results:
        return f'No results for "{validated.query}". Try a different spelling or broader term.'
    return format_results(results)


def format_results(results: list[SearchResult]) -> str:
    return "\n\n".join(f"[{r.type}] **{r.text}**\n  → {r.path}" for r in results)
