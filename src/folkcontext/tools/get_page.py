"""Tool handler for get_page.

Fetches one page (through the cache) and returns its title, readable text and
the list of linked recordings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.errors import ErrorCode, FolkContextError
from folkcontext.extractor import extract_article
from folkcontext.models.tools import GetPageInput

if TYPE_CHECKING:
    from folkcontext.models.records import Article
    from folkcontext.state import AppState


async def handle(path: str, state: AppState) -> str:
    """Handle a get_page tool call."""
    log = structlog.get_logger().bind(tool="get_page", path=path)
    log.info("handler_called")

    try:
        validated = GetPageInput(path=path)
    except ValueError as exc:
        raise FolkContextError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion=(
                "Use a path from search results, e.g. /martin.carthy/ or /folk/records/topic.html."
            ),
            recoverable=False,
        ) from exc

    if state.fetcher is None:
        raise RuntimeError("Fetcher not initialized")

    doc = await state.fetcher.fetch(validated.path)
    article = extract_article(doc)
    log.info(
        "page_extracted",
        body_length=len(article.body),
        recording_count=len(article.recordings),
    )
    return format_article(article)


def format_article(article: Article) -> str:
    result = f"# {article.title}\n\n{article.body}"
    if article.recordings:
        lines = "\n".join(f"- {text}" for text in article.recordings)
        result += f"\n\n## Recordings\n{lines}"
    return result
