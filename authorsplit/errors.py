"""Domain exceptions for split-stage and CLI diagnostics."""

from __future__ import annotations

from .models.datatypes import Location


class SplitStageError(RuntimeError):
    """Raised when a specific stage of the split run fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ConfigurationError(SplitStageError):
    """Raised for unknown tokenizer/stemmer names or invalid normalization settings."""

    def __init__(
        self,
        *,
        kind: str,
        name: str,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a config error for one offending named setting."""

        super().__init__(
            stage="config",
            detail=detail or f"Unknown {kind} `{name}`.",
            hint=hint,
        )
        self.kind = kind
        self.name = name


class MappingError(SplitStageError):
    """Raised when a tokenizer substring cannot be located in the scanned text.

    Attributes:
        token: Token substring emitted by the tokenizer.
        scanned_text: Text the tokenizer scanned (original or normalized line).
        cursor: Search cursor at the time of failure.
        location: Location of the line being processed.
    """

    def __init__(
        self,
        *,
        token: str,
        scanned_text: str,
        cursor: int,
        location: Location | None = None,
    ) -> None:
        """Initialize a mapping failure with the offending token and line context."""

        where = ""
        if location is not None:
            where = f" ({location.path or '<memory>'}:{location.begin_line})"
        super().__init__(
            stage="split",
            detail=(
                f"Cannot find text of `{token}` at or after offset {cursor} "
                f"in `{scanned_text}`{where}."
            ),
            hint="The selected tokenizer emitted text that is not present in its input.",
        )
        self.token = token
        self.scanned_text = scanned_text
        self.cursor = cursor
        self.location = location
