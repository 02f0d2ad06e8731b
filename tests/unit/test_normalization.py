from __future__ import annotations

import pytest

from toolbox_search_server.normalization import (
    NormalizedMatch,
    contains,
    find_match,
    is_whitespace,
    normalize_text,
)

SAMPLES = [
    "",
    "PDF Merge",
    "  IMG\tto\nWebP ",
    "Map Tools",
    "ALLCAPS",
    "Xİy",
    "   ",
]


def test_normalize_lowercases_and_strips_all_whitespace() -> None:
    assert normalize_text("  PDF\tMerge\n") == "pdfmerge"
    assert normalize_text("Map Tools") == "maptools"
    assert normalize_text("a\r\nb\x0bc\x0cd") == "abcd"
    assert normalize_text("   ") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text: str) -> None:
    once = normalize_text(text)
    assert normalize_text(once) == once


def test_is_whitespace_predicate() -> None:
    for ch in (" ", "\t", "\n", "\r", "\x0b", "\x0c", " ", "　"):
        assert is_whitespace(ch)
    for ch in ("a", "-", "_", "0"):
        assert not is_whitespace(ch)


def test_find_match_ignores_spacing_differences() -> None:
    assert find_match("MapTools", "Map Tools") == NormalizedMatch(start=0, length=8)
    assert find_match("Map Tools", "maptools") == NormalizedMatch(start=0, length=8)


def test_find_match_prefers_leftmost_occurrence() -> None:
    assert find_match("abcabc", "abc") == NormalizedMatch(start=0, length=3)
    assert find_match("xx abc abc", "abc") == NormalizedMatch(start=2, length=3)


@pytest.mark.parametrize("query", ["", " ", "\t \n"])
def test_find_match_empty_query_is_no_match(query: str) -> None:
    assert find_match("PDF Merge", query) is None


def test_find_match_missing_characters() -> None:
    assert find_match("PDF Merge", "zzz") is None
    assert find_match("", "a") is None


@pytest.mark.parametrize(
    ("text", "query"),
    [
        ("Remove Spaces", "m o v e\tS p"),
        ("Remove Spaces", "oves"),
        ("Video to GIF", "o t o g"),
        ("ZIP Extract", " zipex "),
    ],
)
def test_whitespace_inserted_into_substring_still_matches(text: str, query: str) -> None:
    assert contains(text, query)


@pytest.mark.parametrize(
    ("text", "query"),
    [
        ("PDF Merge", "pdf"),
        ("Audio Trim", "DIO T"),
        ("Text Decrypt", "zz"),
    ],
)
def test_case_never_changes_outcome(text: str, query: str) -> None:
    expected = contains(text, query)
    assert contains(text.upper(), query) is expected
    assert contains(text.lower(), query.upper()) is expected
    assert contains(text.swapcase(), query.swapcase()) is expected


def test_find_match_skips_occurrences_inside_a_folded_character() -> None:
    # "İ" folds to "i" plus a combining dot.
    assert find_match("İstanbul", "i") is None
    assert find_match("İzmir iz", "iz") == NormalizedMatch(start=6, length=2)
    assert not contains("Xİy", "\u0307y")
