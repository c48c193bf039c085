"""Filters for the Child Ballad and Laws index listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folkcontext.rules import parse_number_range

if TYPE_CHECKING:
    from folkcontext.models.records import BalladEntry, LawsEntry


def filter_ballads(entries: list[BalladEntry], query: str | None) -> list[BalladEntry]:
    """Filter ballads by number range (``"1-50"``) or free text.

    A range keeps entries whose leading number lies within the inclusive
    bounds; variant letters are ignored. Free text matches a title substring
    (case-insensitive) or a prefix of the ballad number.
    """
    if not query:
        return list(entries)

    bounds = parse_number_range(query)
    if bounds is not None:
        start, end = bounds
        return [
            entry
            for entry in entries
            if entry.numeric_value is not None and start <= entry.numeric_value <= end
        ]

    needle = query.lower()
    return [
        entry
        for entry in entries
        if needle in entry.title.lower() or entry.number.lower().startswith(needle)
    ]


def filter_laws(entries: list[LawsEntry], query: str | None) -> list[LawsEntry]:
    """Filter Laws entries by code prefix (``"K"``, ``"l1"``) or title substring."""
    if not query:
        return list(entries)

    prefix = query.upper()
    needle = query.lower()
    return [
        entry
        for entry in entries
        if entry.code.upper().startswith(prefix) or needle in entry.title.lower()
    ]
