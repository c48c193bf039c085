"""Extraction of structured records from Mainly Norfolk HTML.

Every routine here is a pure, synchronous function of a parsed document:
no I/O, no shared state. Missing elements produce empty results, and list
items that lack the expected catalogue pattern are skipped silently, since
the site's markup is not a schema.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from folkcontext.models.records import (
    Article,
    ArtistPage,
    BalladEntry,
    DiscographyEntry,
    LawsEntry,
    SearchResult,
    SearchResultType,
)
from folkcontext.paths import resolve_path
from folkcontext.rules import CHILD_NUMBER, LAWS_CODE, RECORD_YEAR

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bs4 import BeautifulSoup, Tag

MAX_SEARCH_RESULTS = 25
MAX_ARTICLE_CHARS = 6000
MAX_RECORDINGS = 30
MIN_BLOCK_CHARS = 20
MIN_BIO_PARAGRAPH_CHARS = 50
MAX_BIO_PARAGRAPHS = 4

_RECORDS_SEGMENT = "records/"
_PAGE_EXTENSIONS = (".html", ".htm")
_HEADING_TAGS = frozenset({"h2", "h3"})


def _text(element: Tag) -> str:
    return element.get_text().strip()


def _links(doc: BeautifulSoup) -> Iterator[tuple[str, str]]:
    """Yield ``(href, trimmed text)`` for every anchor that has an href."""
    for anchor in doc.find_all("a", href=True):
        href = anchor.get("href")
        if isinstance(href, str) and href:
            yield href, _text(anchor)


def extract_title(doc: BeautifulSoup) -> str:
    """Return the ``<title>`` text, falling back to the first ``<h1>``."""
    title = doc.find("title")
    if title is not None and _text(title):
        return _text(title)
    heading = doc.find("h1")
    return _text(heading) if heading is not None else ""


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def classify_link(href: str, resolved_path: str) -> SearchResultType:
    """Classify a search hit from the main index.

    ``artist/album`` is decided on the resolved path and takes precedence;
    ``artist`` is decided on the raw href (artist pages sit one level above
    ``/folk/``).
    """
    if _RECORDS_SEGMENT in resolved_path:
        return "artist/album"
    if href.startswith("../"):
        return "artist"
    return "page"


def extract_search_hits(
    doc: BeautifulSoup,
    referrer_path: str,
    query: str,
    kind: SearchResultType | None = None,
) -> list[SearchResult]:
    """Return every link whose visible text contains ``query``, case-insensitively.

    When ``kind`` is given every hit gets that type (used for the ballad and
    Laws indexes); otherwise hits are classified by their link target.
    """
    needle = query.lower()
    hits: list[SearchResult] = []
    for href, text in _links(doc):
        if not text or needle not in text.lower():
            continue
        path = resolve_path(href, referrer_path)
        hits.append(
            SearchResult(text=text, path=path, type=kind or classify_link(href, path))
        )
    return hits


def merge_search_hits(
    *hit_lists: list[SearchResult], limit: int = MAX_SEARCH_RESULTS
) -> list[SearchResult]:
    """Merge hit lists, de-duplicating by path and capping the total.

    The last hit seen for a path wins; it keeps the position of the first.
    The cap is applied after de-duplication.
    """
    by_path: dict[str, SearchResult] = {}
    for hits in hit_lists:
        for hit in hits:
            by_path[hit.path] = hit
    return list(by_path.values())[:limit]


def find_first_link(doc: BeautifulSoup, referrer_path: str, query: str) -> str | None:
    """Resolved path of the first link whose text contains ``query``, or None."""
    needle = query.lower()
    for href, text in _links(doc):
        if needle in text.lower():
            return resolve_path(href, referrer_path)
    return None


# ---------------------------------------------------------------------------
# Catalogue indexes
# ---------------------------------------------------------------------------


def _list_item_links(doc: BeautifulSoup) -> Iterator[tuple[str, str, str]]:
    """Yield ``(href, link text, full item text)`` for each ``<li>`` with a usable first link."""
    for item in doc.find_all("li"):
        anchor = item.find("a")
        if anchor is None:
            continue
        href = anchor.get("href")
        title = _text(anchor)
        if not isinstance(href, str) or not href or not title:
            continue
        yield href, title, item.get_text()


def extract_ballad_entries(doc: BeautifulSoup, referrer_path: str) -> list[BalladEntry]:
    """Parse Child Ballad index items such as ``Tam Lin (Roud 35; Child 39A)``."""
    entries: list[BalladEntry] = []
    for href, title, full_text in _list_item_links(doc):
        number = CHILD_NUMBER.search(full_text)
        if number is None:
            continue
        entries.append(
            BalladEntry(number=number, title=title, path=resolve_path(href, referrer_path))
        )
    return entries


def extract_laws_entries(doc: BeautifulSoup, referrer_path: str) -> list[LawsEntry]:
    """Parse Laws index items such as ``The Crafty Ploughboy (Roud 399; Laws L1)``."""
    entries: list[LawsEntry] = []
    for href, title, full_text in _list_item_links(doc):
        code = LAWS_CODE.search(full_text)
        if code is None:
            continue
        entries.append(LawsEntry(code=code, title=title, path=resolve_path(href, referrer_path)))
    return entries


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def extract_article(doc: BeautifulSoup) -> Article:
    """Extract readable text and linked recordings from a page.

    Body blocks are paragraphs, list items and h2/h3 headings longer than
    20 characters, in document order, followed by every ``<pre>`` block
    (lyrics) as a fenced block. The body is cut at 6000 characters.
    """
    parts: list[str] = []
    for element in doc.find_all(["p", "li", "h2", "h3"]):
        text = _text(element)
        if len(text) <= MIN_BLOCK_CHARS:
            continue
        if element.name in _HEADING_TAGS:
            parts.append(f"\n\n## {text}\n")
        else:
            parts.append(f"{text}\n\n")

    for pre in doc.find_all("pre"):
        text = _text(pre)
        if text:
            parts.append(f"\n```\n{text}\n```\n")

    body = "".join(parts)[:MAX_ARTICLE_CHARS]

    recordings: list[str] = []
    seen: set[str] = set()
    for href, text in _links(doc):
        if _RECORDS_SEGMENT not in href or not text or text in seen:
            continue
        seen.add(text)
        recordings.append(text)
        if len(recordings) == MAX_RECORDINGS:
            break

    return Article(title=extract_title(doc), body=body, recordings=recordings)


def _is_discography_target(path: str) -> bool:
    bare = path.split("#", 1)[0].split("?", 1)[0]
    return _RECORDS_SEGMENT in bare or bare.endswith(_PAGE_EXTENSIONS)


def extract_discography(doc: BeautifulSoup, referrer_path: str) -> ArtistPage:
    """Extract a short biography and the record links from an artist page."""
    bio_parts: list[str] = []
    for paragraph in doc.find_all("p"):
        text = _text(paragraph)
        if len(text) > MIN_BIO_PARAGRAPH_CHARS:
            bio_parts.append(text)
            if len(bio_parts) == MAX_BIO_PARAGRAPHS:
                break

    entries: list[DiscographyEntry] = []
    for href, text in _links(doc):
        if not text:
            continue
        path = resolve_path(href, referrer_path)
        if not _is_discography_target(path):
            continue
        entries.append(DiscographyEntry(title=text, year=RECORD_YEAR.search(text), path=path))

    return ArtistPage(title=extract_title(doc), bio="\n\n".join(bio_parts), entries=entries)
