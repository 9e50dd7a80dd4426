"""Plain-text document loading.

Responsibilities:
- Read a UTF-8 text file into a `Document` with one `Line` per physical line.
- Map filesystem and decoding failures to stage-scoped errors.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import SplitStageError
from ..models.datatypes import Document


def load_document(path: Path) -> Document:
    """Load a text file into a document whose line locations carry `path`."""

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SplitStageError(
            stage="load",
            detail=f"Input file not found: `{path}`.",
            hint="Provide an existing UTF-8 text file.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise SplitStageError(
            stage="load",
            detail=f"Input file `{path}` is not valid UTF-8: {exc.reason}.",
            hint="Convert the file to UTF-8 and rerun.",
        ) from exc
    return Document.from_text(text, path=str(path))
