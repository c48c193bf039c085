from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from folkcontext.rules import leading_number

SearchResultType = Literal["page", "artist", "artist/album", "Child Ballad", "Laws Index"]


class SearchResult(BaseModel):
    """Single link-text match returned by search_folk."""

    text: str
    path: str  # Site-absolute path or full URL
    type: SearchResultType


class BalladEntry(BaseModel):
    """One entry of the Child Ballad index."""

    number: str  # "39" or "39A"; the letter is a variant suffix
    title: str
    path: str

    @property
    def numeric_value(self) -> int | None:
        """Leading integer of ``number``, ignoring any letter suffix."""
        return leading_number(self.number)


class LawsEntry(BaseModel):
    """One entry of the Laws index, e.g. code ``"L1"``."""

    code: str
    title: str
    path: str


class DiscographyEntry(BaseModel):
    title: str
    year: str | None = None  # Four digits, taken from "(1972)" in the link text
    path: str


class Article(BaseModel):
    """Readable text extracted from a single page."""

    title: str
    body: str
    recordings: list[str] = []


class ArtistPage(BaseModel):
    title: str
    bio: str
    entries: list[DiscographyEntry] = []


class RecordLabel(BaseModel):
    name: str
    description: str
    path: str
