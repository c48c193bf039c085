"""Tool handler for child_ballads."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.config import CHILD_INDEX_PATH, SONGS_DIR_PATH
from folkcontext.errors import ErrorCode, FolkContextError
from folkcontext.extractor import extract_ballad_entries
from folkcontext.filters import filter_ballads
from folkcontext.models.tools import IndexFilterInput

if TYPE_CHECKING:
    from folkcontext.models.records import BalladEntry
    from folkcontext.state import AppState


async def handle(filter: str | None, state: AppState) -> str:  # noqa: A002
    """Handle a child_ballads tool call."""
    log = structlog.get_logger().bind(tool="child_ballads", filter=filter)
    log.info("handler_called")

    try:
        validated = IndexFilterInput(filter=filter)
    except ValueError as exc:
        raise FolkContextError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion="Use a number range like '1-50' or a title fragment (max 200 chars).",
            recoverable=False,
        ) from exc

    if state.fetcher is None:
        raise RuntimeError("Fetcher not initialized")

    doc = await state.fetcher.fetch(CHILD_INDEX_PATH)
    ballads = extract_ballad_entries(doc, SONGS_DIR_PATH)
    matches = filter_ballads(ballads, validated.filter)
    log.info("ballads_listed", total=len(ballads), matched=len(matches))

    return format_ballads(matches) or "No matching ballads found"


def format_ballads(entries: list[BalladEntry]) -> str:
    return "\n\n".join(f"**Child {e.number}**: {e.title}\n  → {e.path}" for e in entries)
