"""Unit tests for the named extraction rules."""

from __future__ import annotations

import pytest

from folkcontext.rules import (
    ALL_RULES,
    CHILD_NUMBER,
    LAWS_CODE,
    LEADING_NUMBER,
    RECORD_YEAR,
    leading_number,
    parse_number_range,
)


class TestChildNumber:
    def test_plain_number(self) -> None:
        assert CHILD_NUMBER.search("(Roud 54; Child 84)") == "84"

    def test_letter_suffix(self) -> None:
        assert CHILD_NUMBER.search("(Roud 20; Child 39A)") == "39A"

    def test_case_insensitive(self) -> None:
        assert CHILD_NUMBER.search("child 12") == "12"

    def test_lowercase_suffix_normalised(self) -> None:
        assert CHILD_NUMBER.search("Child 39a") == "39A"

    def test_missing(self) -> None:
        assert CHILD_NUMBER.search("(Roud 397)") is None

    def test_word_without_number(self) -> None:
        assert CHILD_NUMBER.search("A child's song") is None


class TestLawsCode:
    def test_code(self) -> None:
        assert LAWS_CODE.search("(Roud 399; Laws L1)") == "L1"

    def test_multi_digit(self) -> None:
        assert LAWS_CODE.search("Laws P35") == "P35"

    def test_lowercase_upper_cased(self) -> None:
        assert LAWS_CODE.search("laws k12") == "K12"

    def test_missing_letter(self) -> None:
        assert LAWS_CODE.search("Laws 12") is None


class TestRecordYear:
    def test_parenthesised_year(self) -> None:
        assert RECORD_YEAR.search("Sweet England (1959)") == "1959"

    def test_bare_year_ignored(self) -> None:
        assert RECORD_YEAR.search("Sweet England 1959") is None

    def test_short_number_ignored(self) -> None:
        assert RECORD_YEAR.search("Volume (12)") is None


class TestNumbers:
    def test_leading_number_strips_suffix(self) -> None:
        assert LEADING_NUMBER.search("39A") == "39"
        assert leading_number("39A") == 39

    def test_leading_number_missing(self) -> None:
        assert leading_number("A39") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1-50", (1, 50)), (" 12-40 ", (12, 40)), ("100-305", (100, 305))],
    )
    def test_range(self, text: str, expected: tuple[int, int]) -> None:
        assert parse_number_range(text) == expected

    @pytest.mark.parametrize("text", ["tam lin", "12", "1-", "-5", "1-5-9", "a-b"])
    def test_not_a_range(self, text: str) -> None:
        assert parse_number_range(text) is None


def test_rule_names_are_unique() -> None:
    names = [rule.name for rule in ALL_RULES]
    assert len(names) == len(set(names))
