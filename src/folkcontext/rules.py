"""Named text-pattern rules for pulling catalogue fields out of page text.

The site has no structured markup for catalogue numbers; they appear in free
text such as ``"(Roud 20; Child 39A)"``. Each rule wraps exactly one pattern so
that markup drift on the site can be fixed in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionRule:
    """A regex with a single capture group and a documented contract."""

    name: str
    pattern: re.Pattern[str]
    description: str
    upper: bool = False

    def search(self, text: str) -> str | None:
        """Return the first captured value in ``text``, or None."""
        match = self.pattern.search(text)
        if match is None:
            return None
        value = match.group(1)
        return value.upper() if self.upper else value


CHILD_NUMBER = ExtractionRule(
    name="child_number",
    pattern=re.compile(r"Child\s+(\d+[A-Z]?)", re.IGNORECASE),
    description=(
        '"Child 39A" -> "39A"; digits with an optional variant letter, '
        'upper-cased so "Child 39a" also gives "39A"'
    ),
    upper=True,
)

LAWS_CODE = ExtractionRule(
    name="laws_code",
    pattern=re.compile(r"Laws\s+([A-Z]\d+)", re.IGNORECASE),
    description='"Laws L1" -> "L1"; one letter followed by digits, upper-cased',
    upper=True,
)

RECORD_YEAR = ExtractionRule(
    name="record_year",
    pattern=re.compile(r"\((\d{4})\)"),
    description='"Shirley Collins (1959)" -> "1959"; parenthesised four-digit year',
)

LEADING_NUMBER = ExtractionRule(
    name="leading_number",
    pattern=re.compile(r"^(\d+)"),
    description='"39A" -> "39"; digits at the start of a catalogue number',
)

_NUMBER_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")


def parse_number_range(text: str) -> tuple[int, int] | None:
    """Parse ``"12-40"`` into ``(12, 40)``; anything else gives None."""
    match = _NUMBER_RANGE_RE.match(text.strip())
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def leading_number(text: str) -> int | None:
    value = LEADING_NUMBER.search(text)
    return int(value) if value is not None else None


ALL_RULES: tuple[ExtractionRule, ...] = (CHILD_NUMBER, LAWS_CODE, RECORD_YEAR, LEADING_NUMBER)
