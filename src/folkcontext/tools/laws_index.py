"""Tool handler for laws_index."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.config import LAWS_INDEX_PATH, SONGS_DIR_PATH
from folkcontext.errors import ErrorCode, FolkContextError
from folkcontext.extractor import extract_laws_entries
from folkcontext.filters import filter_laws
from folkcontext.models.tools import IndexFilterInput

if TYPE_CHECKING:
    from folkcontext.models.records import LawsEntry
    from folkcontext.state import AppState


async def handle(filter: str | None, state: AppState) -> str:  # noqa: A002
    """Handle a laws_index tool call."""
    log = structlog.get_logger().bind(tool="laws_index", filter=filter)
    log.info("handler_called")

    try:
        validated = IndexFilterInput(filter=filter)
    except ValueError as exc:
        raise FolkContextError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Use a code prefix like 'K' or a title fragment (max 200 chars).",
            recoverable=False,
        ) from exc

    if state.fetcher is None:
        raise RuntimeError("Fetcher not initialized")

    doc = await state.fetcher.fetch(LAWS_INDEX_PATH)
    songs = extract_laws_entries(doc, SONGS_DIR_PATH)
    matches = filter_laws(songs, validated.filter)
    log.info("laws_listed", total=len(songs), matched=len(matches))

    return format_laws(matches) or "No matching songs found"


def format_laws(entries: list[LawsEntry]) -> str:
    return "\n\n".join(f"**Laws {e.code}**: {e.title}\n  → {e.path}" for e in entries)
