"""
Tests for size string parsing.
"""

import math

import numpy as np
import pytest

from humanbytes.core.cache import PARSE_STATIC
from humanbytes.core.parser import Parser, normalize


@pytest.fixture
def parser() -> Parser:
    return Parser()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("1KB", 1024),
        ("1kb", 1024),
        ("1 MB", 1048576),
        ("1gb", 1073741824),
        ("1TB", 1099511627776),
        ("1pb", 1125899906842624),
        ("1.5kb", 1536),
        ("1.5 MB", 1572864),
        ("+5kb", 5120),
        ("-1.5kb", -1536),
        ("100mb", 104857600),
        ("500 GB", 536870912000),
        ("3 Tb", 3298534883328),
    ],
)
def test_parse_with_unit(parser: Parser, text: str, expected: int) -> None:
    assert parser.parse(text) == expected


def test_parse_floors_fractional_bytes(parser: Parser) -> None:
    assert parser.parse("1.1kb") == 1126
    assert parser.parse("-1.1kb") == -1127


def test_parse_returns_int(parser: Parser) -> None:
    result = parser.parse("1.5kb")
    assert isinstance(result, int)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1024", 1024),
        ("-5", -5),
        ("5b", 5),
        ("5 B", 5),
        ("12abc", 12),
        ("1.7", 1),
        ("1e3kb", 1),
        ("2 bytes", 2),
        ("  42  ", 42),
    ],
)
def test_parse_falls_back_to_leading_integer(parser: Parser, text: str, expected: int) -> None:
    assert parser.parse(text) == expected


@pytest.mark.parametrize("text", ["not a number", "", "   ", "kb", "+-5", "١٢kb"])
def test_parse_unparseable_returns_none(parser: Parser, text: str) -> None:
    assert parser.parse(text) is None


def test_parse_whitespace_is_ignored_everywhere(parser: Parser) -> None:
    assert parser.parse(" 1kb ") == 1024
    assert parser.parse("1 0 kb") == 10240
    assert parser.parse("1\tMB") == 1048576
    assert parser.parse("- 5") == -5


def test_parse_numbers_pass_through(parser: Parser) -> None:
    assert parser.parse(1024) == 1024
    assert parser.parse(1.5) == 1.5
    assert parser.parse(-3) == -3
    assert parser.parse(math.inf) == math.inf
    assert parser.parse(np.int64(7)) == 7


def test_parse_nan_returns_none(parser: Parser) -> None:
    assert parser.parse(math.nan) is None
    assert parser.parse(np.float64("nan")) is None


@pytest.mark.parametrize("value", [None, True, False, [1], {"kb": 1}, b"1kb"])
def test_parse_other_types_return_none(parser: Parser, value: object) -> None:
    assert parser.parse(value) is None


def test_parse_overflow_returns_none(parser: Parser) -> None:
    assert parser.parse("9" * 400 + "kb") is None


def test_parse_overflow_without_unit_returns_none(parser: Parser) -> None:
    assert parser.parse("9" * 400) is None
    assert parser.parse("-" + "9" * 400 + "b") is None
    assert parser.parse("9" * 300) == int("9" * 300)


def test_parse_cache_uses_normalized_key(parser: Parser) -> None:
    assert parser.parse("3 KB") == 3072
    assert "3kb" in parser.cache
    assert parser.parse("3kb") == 3072
    assert parser.cache.info().hits == 1


def test_parse_failures_are_not_cached(parser: Parser) -> None:
    assert parser.parse("abc") is None
    assert "abc" not in parser.cache
    assert len(parser.cache) == 0


def test_static_table_matches_computed_output() -> None:
    uncached = Parser(max_entries=0)
    for key, expected in PARSE_STATIC.items():
        assert uncached._parse_key(key) == expected


def test_normalize() -> None:
    assert normalize(" 1 MB\n") == "1mb"
    assert normalize("1 GB") == "1gb"
