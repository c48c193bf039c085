"""MCP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState via the FastMCP lifespan context manager
- Register tools
- Serve over stdio
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent

import folkcontext.tools.artist_discography as t_artist
import folkcontext.tools.child_ballads as t_child
import folkcontext.tools.get_page as t_get_page
import folkcontext.tools.laws_index as t_laws
import folkcontext.tools.record_labels as t_labels
import folkcontext.tools.search_folk as t_search
from folkcontext import __version__
from folkcontext.cache import PageCache
from folkcontext.config import SITE_ORIGIN, Settings
from folkcontext.errors import FolkContextError
from folkcontext.fetcher import Fetcher, build_http_client
from folkcontext.rules import ALL_RULES
from folkcontext.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # Logs go to stderr; stdout is reserved for the MCP JSON-RPC stream
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncGenerator[AppState, None]:
    """Create and tear down all shared resources for the server's lifetime."""
    settings = Settings()
    _setup_logging(settings)

    log.info("server_starting", version=__version__)
    log.debug("extraction_rules_loaded", rules=[rule.name for rule in ALL_RULES])

    http_client = build_http_client(settings.fetcher)
    cache = PageCache(max_entries=settings.cache.max_entries)
    fetcher = Fetcher(http_client, cache)

    state = AppState(
        settings=settings,
        http_client=http_client,
        cache=cache,
        fetcher=fetcher,
    )

    log.info(
        "server_started",
        version=__version__,
        site=SITE_ORIGIN,
        cache_max_entries=settings.cache.max_entries,
    )

    try:
        yield state
    finally:
        cache.clear()
        await http_client.aclose()
        log.info("server_stopping")


# ---------------------------------------------------------------------------
# FastMCP instance and tool registration
# ---------------------------------------------------------------------------

mcp = FastMCP("folkcontext", lifespan=lifespan)
# FastMCP doesn't expose a version kwarg; set it on the underlying Server
# so the MCP initialize handshake reports our version, not the SDK's.
mcp._mcp_server.version = __version__  # pyright: ignore[reportPrivateUsage]


def _serialise_tool_error(error: FolkContextError) -> CallToolResult:
    """Convert a FolkContextError to the MCP tool error result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(error.to_dict()))],
        isError=True,
    )


async def _run_tool(tool: str, call: Awaitable[str]) -> object:
    try:
        return await call
    except FolkContextError as exc:
        log.warning(
            "tool_error",
            tool=tool,
            code=exc.code,
            message=exc.message,
            recoverable=exc.recoverable,
        )
        return _serialise_tool_error(exc)
    except Exception:
        log.error("tool_unexpected_error", tool=tool, exc_info=True)
        raise


@mcp.tool()
async def search_folk(query: str, ctx: Context) -> object:
    """Search Mainly Norfolk for folk music info. Use this to find:
    - Artists (Martin Carthy, Shirley Collins, Steeleye Span, etc.)
    - Songs by title (Reynardine, Tam Lin, Barbara Allen, etc.)
    - Child Ballad numbers (Child 84, Child 39, etc.)
    - Albums and recordings
    Returns matching results with paths you can use with other tools.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("search_folk", t_search.handle(query, state))


@mcp.tool()
async def get_page(path: str, ctx: Context) -> object:
    """Fetch and read a page from Mainly Norfolk. Use paths from search results.

    Good for reading artist biographies and discographies, song histories,
    lyrics and recorded versions, and album details and track listings.
    Example paths: /martin.carthy/ or /folk/records/topic.html
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("get_page", t_get_page.handle(path, state))


@mcp.tool()
async def child_ballads(ctx: Context, filter: str | None = None) -> object:  # noqa: A002
    """List the Child Ballads, the 305 traditional English and Scottish ballads
    compiled by Francis James Child.

    Optional filter: a number range like '1-50' or a text search.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("child_ballads", t_child.handle(filter, state))


@mcp.tool()
async def laws_index(ctx: Context, filter: str | None = None) -> object:  # noqa: A002
    """Browse the Laws Index, G. Malcolm Laws' classification of American
    ballads of British origin.

    Optional filter: a code prefix like 'K' or a text search.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("laws_index", t_laws.handle(filter, state))


@mcp.tool()
async def artist_discography(artist: str, ctx: Context) -> object:
    """Get a folk artist's discography with album details.

    Accepts an artist name ('Martin Carthy') or a path from search results
    ('/martin.carthy/').
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("artist_discography", t_artist.handle(artist, state))


@mcp.tool()
async def record_labels(ctx: Context) -> object:
    """Browse British folk record label discographies: Topic Records,
    Fellside, Greentrax and other essential folk labels.
    """
    state: AppState = ctx.request_context.lifespan_context
    return await _run_tool("record_labels", t_labels.handle(state))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
