"""Tool handler for artist_discography.

Accepts either an artist page path or a name. Names are looked up on the main
folk index by link text (first match wins) before the artist page is fetched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from folkcontext.config import FOLK_INDEX_PATH
from folkcontext.errors import ErrorCode, FolkContextError
from folkcontext.extractor import extract_discography, find_first_link
from folkcontext.models.tools import ArtistDiscographyInput

if TYPE_CHECKING:
    from folkcontext.models.records import ArtistPage
    from folkcontext.state import AppState


async def handle(artist: str, state: AppState) -> str:
    """Handle an artist_discography tool call."""
    log = structlog.get_logger().bind(tool="artist_discography", artist=artist)
    log.info("handler_called")

    try:
        validated = ArtistDiscographyInput(artist=artist)
    except ValueError as exc:
        raise FolkContextError(
            code=ErrorCode.INVALID_INPUT,
            message=str(exc),
            suggestion=(
                "Provide an artist name like 'Martin Carthy' or a path like '/martin.carthy/'."
            ),
            recoverable=False,
        ) from exc

    if state.fetcher is None:
        raise RuntimeError("Fetcher not initialized")

    path = validated.artist
    if not path.startswith("/"):
        index_doc = await state.fetcher.fetch(FOLK_INDEX_PATH)
        found = find_first_link(index_doc, FOLK_INDEX_PATH, validated.artist)
        if found is None:
            log.info("artist_not_found")
            return f'Couldn\'t find artist "{validated.artist}". Try searching first.'
        path = found
        log.info("artist_resolved", path=path)

    doc = await state.fetcher.fetch(path)
    page = extract_discography(doc, path)
    log.info("discography_extracted", entry_count=len(page.entries))
    return format_discography(page)


def format_discography(page: ArtistPage) -> str:
    result = f"# {page.title}\n\n"
    if page.bio:
        result += f"{page.bio}\n\n"
    result += f"## Discography ({len(page.entries)} entries)\n\n"
    result += "\n".join(
        f"- **{e.title}**{f' ({e.year})' if e.year else ''}\n  → {e.path}" for e in page.entries
    )
    return result
