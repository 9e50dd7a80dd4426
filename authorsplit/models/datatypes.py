"""Core datatypes shared across authorsplit modules.

Responsibilities:
- Represent the document/line/token records the split stage reads and fills.
- Keep source locations immutable so findings can be reported back exactly.

Key types:
- `Location`, `Token`, `Line`, and `Document`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True)
class Location:
    """Source coordinates of a line or token.

    Attributes:
        path: Source path, or empty string for in-memory text.
        begin_line: 1-based first line number.
        begin_column: 0-based inclusive character offset within the line.
        end_line: 1-based last line number.
        end_column: 0-based exclusive character offset within the line.
    """

    path: str = ""
    begin_line: int = 0
    begin_column: int = 0
    end_line: int = 0
    end_column: int = 0

    def span(self, begin_column: int, end_column: int) -> Location:
        """Return a same-line location covering `[begin_column, end_column)`."""

        return replace(self, begin_column=begin_column, end_column=end_column)


@dataclass(slots=True)
class Token:
    """A word or punctuation mark extracted from one line.

    Attributes:
        text: Literal source substring backing this token.
        normalized: Text after configured normalization operations.
        location: Exact source span of `text`.
        stem: Stemmed form of `normalized`, or `None` without a stemmer.
        index: Position of this token in `Document.tokens`.
    """

    text: str
    normalized: str
    location: Location
    stem: str | None = None
    index: int = -1


@dataclass(slots=True)
class Line:
    """One physical line of source text and the tokens found on it."""

    text: str
    location: Location = field(default_factory=Location)
    tokens: list[Token] = field(default_factory=list)


@dataclass(slots=True)
class Document:
    """Ordered lines plus the flat, line-major list of all their tokens.

    Attributes:
        lines: Source lines in document order.
        tokens: Every token of every line, in processing order.
        processed_stages: Names of processing stages already applied, in order.
    """

    lines: list[Line] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    processed_stages: list[str] = field(default_factory=list)

    @staticmethod
    def _physical_lines(text: str) -> list[str]:
        """Split on line feeds only, dropping carriage returns and a final empty segment."""

        lines = [line.removesuffix("\r") for line in text.split("\n")]
        if lines and not lines[-1]:
            lines.pop()
        return lines

    @classmethod
    def from_text(cls, text: str, path: str = "") -> Document:
        """Build a document with one `Line` per physical line of `text`."""

        lines = [
            Line(
                text=line_text,
                location=Location(
                    path=path,
                    begin_line=number,
                    begin_column=0,
                    end_line=number,
                    end_column=len(line_text),
                ),
            )
            for number, line_text in enumerate(cls._physical_lines(text), start=1)
        ]
        return cls(lines=lines)

    def mark_processed(self, stage: str) -> None:
        """Record a processing stage name once, keeping first-seen order."""

        if stage not in self.processed_stages:
            self.processed_stages.append(stage)

    def has_processed(self, stage: str) -> bool:
        """Return whether a processing stage was already recorded."""

        return stage in self.processed_stages
