"""Shared pytest fixtures for the authorsplit test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from authorsplit.models.datatypes import Document


SAMPLE_TEXT = "one two three\nOne Two Three.\n\nthe the\n"


@pytest.fixture
def sample_document() -> Document:
    """Provide a small multi-line document including a blank line and repeats."""

    return Document.from_text(SAMPLE_TEXT, path="sample.txt")


@pytest.fixture
def sample_text_path(tmp_path: Path) -> Path:
    """Write the sample document to disk for CLI and loader tests."""

    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
