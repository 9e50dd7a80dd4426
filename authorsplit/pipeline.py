"""Split-stage orchestration.

Responsibilities:
- Run normalize/tokenize/map/stem over every line in document order.
- Append tokens to their line and to the flat document token list with a
  driver-owned index counter.
- Record the processing stages that ran on the document.

Key types:
- `SplitPipeline`: orchestration facade.
- `process`: plugin entry point for callers that only hold a document.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .config import SplitConfig
from .models.datatypes import Document, Line, Token
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer
from .text.positions import PositionMapper
from .text.stemmers import Stemmer, create_stemmer
from .text.tokenizers import Tokenizer, create_tokenizer

_StageResult = TypeVar("_StageResult")

SPLIT_STAGE = "split"
STEM_STAGE = "stem"


class SplitPipeline:
    """Tokenize document lines into position-accurate tokens."""

    def __init__(self, run_logger: RunLogger | None = None) -> None:
        """Initialize optional runtime logging."""

        self._run_logger = run_logger

    def process(self, document: Document, config: SplitConfig | None = None) -> Document:
        """Split every line of `document` into tokens, mutating it in place.

        Raises:
            ConfigurationError: If the tokenizer or stemmer name is unknown. No
                line is processed in that case.
            MappingError: If a tokenizer substring cannot be located. Tokens of
                lines processed before the failure are kept.
        """

        resolved = config if config is not None else SplitConfig()
        tokenizer, stemmer = self._run_stage("config", lambda: self._resolve(resolved))
        normalizer = TextNormalizer(resolved.normalization)
        mapper = PositionMapper(normalizer)

        self._run_stage(
            SPLIT_STAGE,
            lambda: self._split_lines(document, resolved, tokenizer, stemmer, normalizer, mapper),
        )

        document.mark_processed(SPLIT_STAGE)
        if stemmer is not None:
            document.mark_processed(STEM_STAGE)
        return document

    def _resolve(self, config: SplitConfig) -> tuple[Tokenizer, Stemmer | None]:
        """Create the configured tokenizer and stemmer instances."""

        return create_tokenizer(config.tokenizer), create_stemmer(config.stemmer)

    def _split_lines(
        self,
        document: Document,
        config: SplitConfig,
        tokenizer: Tokenizer,
        stemmer: Stemmer | None,
        normalizer: TextNormalizer,
        mapper: PositionMapper,
    ) -> int:
        """Tokenize lines in order and return the number of tokens appended."""

        next_index = len(document.tokens)
        appended = 0
        for line in document.lines:
            for token in self._split_line(
                line, config, tokenizer, stemmer, normalizer, mapper
            ):
                token.index = next_index
                next_index += 1
                appended += 1
                line.tokens.append(token)
                document.tokens.append(token)
        return appended

    def _split_line(
        self,
        line: Line,
        config: SplitConfig,
        tokenizer: Tokenizer,
        stemmer: Stemmer | None,
        normalizer: TextNormalizer,
        mapper: PositionMapper,
    ) -> list[Token]:
        """Build the tokens of one line without attaching them."""

        if config.normalize_before_tokenize:
            scanned = normalizer.normalize_aligned(line.text)
            mapped = mapper.map_tokens(
                line.text,
                tokenizer.tokenize(scanned.text),
                scanned=scanned,
                location=line.location,
            )
        else:
            mapped = mapper.map_tokens(
                line.text,
                tokenizer.tokenize(line.text),
                location=line.location,
            )

        return [
            Token(
                text=item.text,
                normalized=item.normalized,
                location=line.location.span(item.begin, item.end),
                stem=stemmer.stem(item.normalized) if stemmer is not None else None,
            )
            for item in mapped
        ]

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        if self._run_logger is not None:
            if isinstance(result, int):
                self._run_logger.log_stage_complete(stage_name, tokens=result)
            else:
                self._run_logger.log_stage_complete(stage_name)
        return result


def process(document: Document, config: SplitConfig | None = None) -> Document:
    """Split `document` into tokens with `config` (defaults when omitted)."""

    return SplitPipeline().process(document, config)
