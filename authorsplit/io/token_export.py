"""Token serialization helpers.

Responsibilities:
- Build deterministic JSON payloads describing split results.
- Persist payloads for downstream analysis stages.
"""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path

from ..models.datatypes import Document, Token


def token_record(token: Token) -> dict[str, object]:
    """Serialize one token with its location."""

    return {
        "index": token.index,
        "text": token.text,
        "normalized": token.normalized,
        "stem": token.stem,
        "location": asdict(token.location),
    }


def token_payload(document: Document) -> dict[str, object]:
    """Serialize all document tokens and the processing stages that ran."""

    return {
        "processed_stages": list(document.processed_stages),
        "line_count": len(document.lines),
        "tokens": [token_record(token) for token in document.tokens],
    }


def dump_token_payload(document: Document) -> str:
    """Return the token payload as stable, pretty-printed JSON."""

    return json.dumps(token_payload(document), ensure_ascii=False, indent=2, sort_keys=True)


def save_token_payload(path: Path, document: Document) -> Path:
    """Write the token payload JSON to `path` and return it."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_token_payload(document), encoding="utf-8")
    return path
