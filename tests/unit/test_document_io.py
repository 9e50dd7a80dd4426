"""Unit tests for document construction, loading, and token export."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from authorsplit import process
from authorsplit.config import SplitConfig
from authorsplit.errors import SplitStageError
from authorsplit.io.document_loader import load_document
from authorsplit.io.token_export import save_token_payload, token_payload
from authorsplit.models.datatypes import Document, Location


def test_document_from_text_builds_numbered_lines() -> None:
    document = Document.from_text("alpha\r\nbeta gamma\n", path="in.txt")

    assert [line.text for line in document.lines] == ["alpha", "beta gamma"]
    assert document.lines[1].location == Location(
        path="in.txt", begin_line=2, begin_column=0, end_line=2, end_column=10
    )
    assert document.tokens == []
    assert document.processed_stages == []


def test_document_from_text_splits_only_on_line_feeds() -> None:
    """Form feeds and Unicode separators stay inside their physical line."""

    document = Document.from_text("one\x0ctwo\u2028three\nfour\x1c\r\n\nlast")

    assert [line.text for line in document.lines] == [
        "one\x0ctwo\u2028three",
        "four\x1c",
        "",
        "last",
    ]
    assert [line.location.begin_line for line in document.lines] == [1, 2, 3, 4]


def test_document_from_text_of_empty_text_has_no_lines() -> None:
    assert Document.from_text("").lines == []


def test_mark_processed_keeps_first_seen_order_once() -> None:
    document = Document()

    document.mark_processed("split")
    document.mark_processed("stem")
    document.mark_processed("split")

    assert document.processed_stages == ["split", "stem"]
    assert document.has_processed("stem")
    assert not document.has_processed("tag")


def test_location_span_keeps_path_and_line() -> None:
    location = Location(path="a.txt", begin_line=3, begin_column=0, end_line=3, end_column=20)

    assert location.span(4, 9) == Location(
        path="a.txt", begin_line=3, begin_column=4, end_line=3, end_column=9
    )


def test_load_document_reads_utf8_file(sample_text_path: Path) -> None:
    document = load_document(sample_text_path)

    assert len(document.lines) == 4
    assert document.lines[0].location.path == str(sample_text_path)


def test_load_document_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SplitStageError) as exc_info:
        load_document(tmp_path / "missing.txt")

    assert exc_info.value.stage == "load"
    assert "Input file not found" in exc_info.value.detail


def test_load_document_reports_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(SplitStageError, match="is not valid UTF-8"):
        load_document(path)


def test_token_payload_serializes_tokens_and_stages() -> None:
    document = process(Document.from_text("One two", path="x.txt"), SplitConfig(stemmer="porter"))

    payload = token_payload(document)

    assert payload["processed_stages"] == ["split", "stem"]
    assert payload["line_count"] == 1
    assert payload["tokens"][0] == {
        "index": 0,
        "text": "One",
        "normalized": "one",
        "stem": "on",
        "location": {
            "path": "x.txt",
            "begin_line": 1,
            "begin_column": 0,
            "end_line": 1,
            "end_column": 3,
        },
    }


def test_save_token_payload_writes_json(tmp_path: Path) -> None:
    document = process(Document.from_text("one two"))

    path = save_token_payload(tmp_path / "out" / "tokens.json", document)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [token["text"] for token in saved["tokens"]] == ["one", "two"]
