"""Unit tests for forward-only token position mapping."""

from __future__ import annotations

import pytest

from authorsplit.errors import MappingError
from authorsplit.models.datatypes import Location
from authorsplit.text.normalizer import Lowercase, Replace, StripDiacritics, TextNormalizer
from authorsplit.text.positions import MappedToken, PositionMapper


def test_repeated_words_bind_to_successive_occurrences() -> None:
    """A repeated token must bind to its next occurrence, never re-match the first."""

    mapper = PositionMapper(TextNormalizer())

    mapped = mapper.map_tokens("the the", ["the", "the"])

    assert [(item.begin, item.end) for item in mapped] == [(0, 3), (4, 7)]


def test_tokens_are_normalized_after_mapping() -> None:
    mapper = PositionMapper(TextNormalizer())

    mapped = mapper.map_tokens("One Two.", ["One", "Two", "."])

    assert mapped == [
        MappedToken(text="One", normalized="one", begin=0, end=3),
        MappedToken(text="Two", normalized="two", begin=4, end=7),
        MappedToken(text=".", normalized=".", begin=7, end=8),
    ]


def test_substring_inside_earlier_word_is_not_matched_before_cursor() -> None:
    mapper = PositionMapper(TextNormalizer([]))

    mapped = mapper.map_tokens("cathedral hedral", ["cathedral", "hedral"])

    assert [(item.begin, item.end) for item in mapped] == [(0, 9), (10, 16)]


def test_missing_token_raises_mapping_error_with_context() -> None:
    """Out-of-order or fabricated tokens should fail with inspectable details."""

    mapper = PositionMapper(TextNormalizer())
    location = Location(path="notes.txt", begin_line=4, end_line=4, end_column=7)

    with pytest.raises(MappingError) as exc_info:
        mapper.map_tokens("one two", ["two", "one"], location=location)

    error = exc_info.value
    assert error.token == "one"
    assert error.cursor == 7
    assert error.scanned_text == "one two"
    assert error.location == location
    assert error.stage == "split"
    assert "notes.txt:4" in error.detail


def test_mapping_is_case_sensitive() -> None:
    mapper = PositionMapper(TextNormalizer())

    with pytest.raises(MappingError):
        mapper.map_tokens("Hello", ["hello"])


def test_normalized_scan_recovers_original_text() -> None:
    """Tokens found in normalized text should report original substrings."""

    normalizer = TextNormalizer([Lowercase(), StripDiacritics()])
    original = "Cr\u00e8me Br\u00fbl\u00e9e"
    scanned = normalizer.normalize_aligned(original)
    mapper = PositionMapper(normalizer)

    mapped = mapper.map_tokens(original, ["creme", "brulee"], scanned=scanned)

    assert mapped == [
        MappedToken(text="Cr\u00e8me", normalized="creme", begin=0, end=5),
        MappedToken(text="Br\u00fbl\u00e9e", normalized="brulee", begin=6, end=12),
    ]


def test_normalized_scan_handles_length_changing_replace() -> None:
    normalizer = TextNormalizer([Replace("colour", "color")])
    original = "My colour chart"
    scanned = normalizer.normalize_aligned(original)
    mapper = PositionMapper(normalizer)

    mapped = mapper.map_tokens(original, ["My", "color", "chart"], scanned=scanned)

    assert [(item.text, item.normalized) for item in mapped] == [
        ("My", "My"),
        ("colour", "color"),
        ("chart", "chart"),
    ]
    for item in mapped:
        assert original[item.begin:item.end] == item.text


def test_empty_piece_list_maps_to_no_tokens() -> None:
    assert PositionMapper(TextNormalizer()).map_tokens("", []) == []
