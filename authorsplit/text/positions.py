"""Token position recovery.

Responsibilities:
- Locate each tokenizer substring in the scanned line with a forward-only
  cursor, so repeated words bind to successive occurrences.
- Translate positions found in normalized text back to original offsets and
  recover the literal original substring.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import MappingError
from ..models.datatypes import Location
from .normalizer import AlignedText, TextNormalizer


@dataclass(frozen=True, slots=True)
class MappedToken:
    """A token substring resolved to original line coordinates.

    Attributes:
        text: Original substring, equal to `line[begin:end]`.
        normalized: Normalized token text.
        begin: Inclusive offset in the original line.
        end: Exclusive offset in the original line.
    """

    text: str
    normalized: str
    begin: int
    end: int


class PositionMapper:
    """Resolve tokenizer output to exact spans of the original line."""

    def __init__(self, normalizer: TextNormalizer) -> None:
        """Initialize with the normalizer used for post-tokenization normalization."""

        self._normalizer = normalizer

    def map_tokens(
        self,
        original: str,
        pieces: Iterable[str],
        scanned: AlignedText | None = None,
        location: Location | None = None,
    ) -> list[MappedToken]:
        """Map tokenizer substrings to original offsets.

        Args:
            original: Original line text.
            pieces: Substrings the tokenizer produced, in order.
            scanned: Normalized line the tokenizer ran against, or `None` when
                it ran against `original`.
            location: Line location, reported on mapping failures.

        Raises:
            MappingError: If a substring is absent at or after the cursor.
        """

        scanned_text = original if scanned is None else scanned.text
        mapped: list[MappedToken] = []
        cursor = 0
        for piece in pieces:
            found = scanned_text.find(piece, cursor)
            if found < 0:
                raise MappingError(
                    token=piece,
                    scanned_text=scanned_text,
                    cursor=cursor,
                    location=location,
                )
            start = found
            end = found + len(piece)
            cursor = end

            if scanned is None:
                mapped.append(
                    MappedToken(
                        text=piece,
                        normalized=self._normalizer.normalize(piece),
                        begin=start,
                        end=end,
                    )
                )
                continue

            begin, finish = scanned.source_span(start, end)
            mapped.append(
                MappedToken(
                    text=original[begin:finish],
                    normalized=piece,
                    begin=begin,
                    end=finish,
                )
            )
        return mapped
