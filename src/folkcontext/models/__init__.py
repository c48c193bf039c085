from __future__ import annotations

from folkcontext.models.cache import CacheEntry
from folkcontext.models.records import (
    Article,
    ArtistPage,
    BalladEntry,
    DiscographyEntry,
    LawsEntry,
    RecordLabel,
    SearchResult,
    SearchResultType,
)
from folkcontext.models.tools import (
    ArtistDiscographyInput,
    GetPageInput,
    IndexFilterInput,
    SearchFolkInput,
)

__all__ = [
    # cache
    "CacheEntry",
    # records
    "SearchResult",
    "SearchResultType",
    "BalladEntry",
    "LawsEntry",
    "DiscographyEntry",
    "Article",
    "ArtistPage",
    "RecordLabel",
    # tools
    "SearchFolkInput",
    "GetPageInput",
    "IndexFilterInput",
    "ArtistDiscographyInput",
]
