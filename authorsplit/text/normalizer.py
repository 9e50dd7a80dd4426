"""Token and line text normalization.

Responsibilities:
- Apply an ordered list of normalization operations (lowercase, replace,
  diacritics) to produce canonical text for comparison and stemming.
- Keep an offset table from every normalized character back to the span of
  the original text that produced it, so tokens found in normalized text can
  be reported at original coordinates.

Key types:
- `Lowercase`, `Replace`, `StripDiacritics`: normalization operations.
- `AlignedText`: normalized text plus its offset table.
- `TextNormalizer`: applies operations in declared order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import re
from typing import ClassVar, Protocol
import unicodedata

from loguru import logger

from ..errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class AlignedText:
    """Normalized text with per-character source spans.

    Attributes:
        text: Normalized text.
        starts: For each character of `text`, inclusive source offset.
        ends: For each character of `text`, exclusive source offset.
        source_length: Length of the original source text.
    """

    text: str
    starts: tuple[int, ...]
    ends: tuple[int, ...]
    source_length: int

    @classmethod
    def identity(cls, text: str) -> AlignedText:
        """Return an alignment where every character maps onto itself."""

        return cls(
            text=text,
            starts=tuple(range(len(text))),
            ends=tuple(range(1, len(text) + 1)),
            source_length=len(text),
        )

    def source_span(self, start: int, end: int) -> tuple[int, int]:
        """Map a `[start, end)` range of `text` to a range of the source text."""

        if end <= start:
            position = self.starts[start] if start < len(self.starts) else self.source_length
            return position, position
        return self.starts[start], self.ends[end - 1]


class NormalizationOperation(Protocol):
    """Protocol for one normalization step."""

    tag: ClassVar[str]

    def apply_aligned(self, source: AlignedText) -> AlignedText:
        """Apply the step and carry source offsets forward."""


# (output text, input start, input end) in offsets of the step input.
_Piece = tuple[str, int, int]


def _rebase(source: AlignedText, pieces: Sequence[_Piece]) -> AlignedText:
    """Build the next alignment from output pieces expressed in `source.text` offsets."""

    characters: list[str] = []
    starts: list[int] = []
    ends: list[int] = []
    for output, input_start, input_end in pieces:
        if not output:
            continue
        source_start, source_end = source.source_span(input_start, input_end)
        for character in output:
            characters.append(character)
            starts.append(source_start)
            ends.append(source_end)
    return AlignedText(
        text="".join(characters),
        starts=tuple(starts),
        ends=tuple(ends),
        source_length=source.source_length,
    )


@dataclass(frozen=True, slots=True)
class Lowercase:
    """Fold every uppercase code point to lowercase, independent of locale."""

    tag: ClassVar[str] = "lowercase"

    def apply(self, text: str) -> str:
        """Return lowercased text."""

        return self.apply_aligned(AlignedText.identity(text)).text

    def apply_aligned(self, source: AlignedText) -> AlignedText:
        """Lowercase per character so expansions keep their source span."""

        pieces = [
            (character.lower(), index, index + 1)
            for index, character in enumerate(source.text)
        ]
        return _rebase(source, pieces)


@dataclass(frozen=True, slots=True)
class Replace:
    """Replace the first (or every) match of `search` with `replacement`.

    Every replacement character maps back to the whole matched source span.
    If a tokenizer later splits one replacement output into several tokens
    (for example a space inserted into a word), those tokens share that span
    and overlap in source coordinates.

    Attributes:
        search: Literal text, or a regular expression when `regex` is set.
        replacement: Replacement text; group references are expanded for regexes.
        regex: Treat `search` as a regular expression.
        replace_all: Replace every match instead of only the first one.
    """

    tag: ClassVar[str] = "replace"

    search: str
    replacement: str = ""
    regex: bool = False
    replace_all: bool = False

    def pattern(self) -> re.Pattern[str]:
        """Compile the search expression."""

        return re.compile(self.search if self.regex else re.escape(self.search))

    def apply(self, text: str) -> str:
        """Return text with the configured substitution applied."""

        return self.apply_aligned(AlignedText.identity(text)).text

    def apply_aligned(self, source: AlignedText) -> AlignedText:
        """Substitute matches; replacement characters take the whole matched span."""

        text = source.text
        matches = list(self.pattern().finditer(text))
        if not self.replace_all:
            matches = matches[:1]

        pieces: list[_Piece] = []
        cursor = 0
        for match in matches:
            pieces.extend((text[index], index, index + 1) for index in range(cursor, match.start()))
            output = match.expand(self.replacement) if self.regex else self.replacement
            pieces.append((output, match.start(), match.end()))
            cursor = match.end()
        pieces.extend((text[index], index, index + 1) for index in range(cursor, len(text)))
        return _rebase(source, pieces)


@dataclass(frozen=True, slots=True)
class StripDiacritics:
    """Map accented letters to their unaccented base letters ("à" -> "a")."""

    tag: ClassVar[str] = "diacritics"

    def apply(self, text: str) -> str:
        """Return text without combining marks."""

        return self.apply_aligned(AlignedText.identity(text)).text

    def apply_aligned(self, source: AlignedText) -> AlignedText:
        """Strip marks; a dropped standalone mark joins the preceding character's span.

        The remaining parts are recomposed, so characters that decompose
        without marks (Hangul syllables) come back unchanged.
        """

        pieces: list[_Piece] = []
        for index, character in enumerate(source.text):
            base = unicodedata.normalize(
                "NFC",
                "".join(
                    part
                    for part in unicodedata.normalize("NFD", character)
                    if not unicodedata.combining(part)
                ),
            )
            if base:
                pieces.append((base, index, index + 1))
            elif pieces:
                output, start, _ = pieces[-1]
                pieces[-1] = (output, start, index + 1)
        return _rebase(source, pieces)


_OPERATION_TYPES: dict[str, type] = {
    Lowercase.tag: Lowercase,
    Replace.tag: Replace,
    StripDiacritics.tag: StripDiacritics,
}


def _replace_from_params(params: object) -> Replace:
    """Build a `Replace` operation from list or mapping parameters."""

    if isinstance(params, Mapping):
        search = params.get("search")
        replacement = params.get("replacement", "")
        regex = bool(params.get("regex", False))
        replace_all = bool(params.get("all", False))
    elif isinstance(params, Sequence) and not isinstance(params, str):
        values = list(params)
        search = values[0] if values else None
        replacement = values[1] if len(values) > 1 else ""
        regex = False
        replace_all = False
    else:
        search = None
        replacement = ""
        regex = False
        replace_all = False

    if not isinstance(search, str) or not isinstance(replacement, str):
        raise ConfigurationError(
            kind="normalization",
            name=Replace.tag,
            detail="`replace` normalization requires string `search` and `replacement` values.",
            hint="Use `[replace, <search>, <replacement>]` or a mapping with `search`.",
        )

    operation = Replace(search=search, replacement=replacement, regex=regex, replace_all=replace_all)
    if regex:
        try:
            operation.pattern()
        except re.error as exc:
            raise ConfigurationError(
                kind="normalization",
                name=Replace.tag,
                detail=f"Invalid `replace` pattern `{search}`: {exc}",
            ) from exc
    return operation


def operation_from_config(entry: object) -> NormalizationOperation | None:
    """Parse one configured normalization entry.

    Accepted shapes are a tag string (`"lowercase"`), a list whose first item is
    the tag (`["replace", "search", "replacement"]`), or a single-key mapping
    (`{"replace": {"search": ..., "replacement": ...}}`).

    Returns:
        The parsed operation, or `None` for unrecognized tags.

    Raises:
        ConfigurationError: If the entry shape or its parameters are invalid.
    """

    params: object = None
    if isinstance(entry, str):
        tag = entry
    elif isinstance(entry, Mapping) and len(entry) == 1:
        tag, params = next(iter(entry.items()))
    elif isinstance(entry, Sequence) and entry and isinstance(entry[0], str):
        tag = entry[0]
        params = list(entry[1:])
    else:
        raise ConfigurationError(
            kind="normalization",
            name=str(entry),
            detail=f"Unsupported normalization entry `{entry!r}`.",
            hint="Use a tag string, a `[tag, ...params]` list, or a `{tag: params}` mapping.",
        )

    tag = str(tag).strip().lower()
    operation_type = _OPERATION_TYPES.get(tag)
    if operation_type is None:
        logger.debug("Ignoring unknown normalization operation `{}`.", tag)
        return None
    if operation_type is Replace:
        return _replace_from_params(params)
    return operation_type()


class TextNormalizer:
    """Apply configured normalization operations in declared order."""

    def __init__(self, operations: Sequence[NormalizationOperation] | None = None) -> None:
        """Initialize with explicit operations, or lowercase-only when `None`."""

        self.operations: tuple[NormalizationOperation, ...] = (
            tuple(operations) if operations is not None else (Lowercase(),)
        )

    def normalize_aligned(self, text: str) -> AlignedText:
        """Normalize text and keep offsets back into `text`."""

        current = AlignedText.identity(text)
        for operation in self.operations:
            current = operation.apply_aligned(current)
        return current

    def normalize(self, text: str) -> str:
        """Normalize text for comparison and stemming."""

        return self.normalize_aligned(text).text
