"""Configuration model and loaders for authorsplit.

Responsibilities:
- Define split-stage options as a typed dataclass.
- Provide loader entry points for mapping-, file-, and environment-based
  configuration, with fail-fast validation of strategy names.

Key types:
- `SplitConfig`: normalized options for one split run.
- `ConfigLoader`: static construction helpers for `SplitConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_required_boolean,
    parse_tag_list,
)
from .text.normalizer import Lowercase, NormalizationOperation, operation_from_config
from .text.stemmers import create_stemmer
from .text.tokenizers import DEFAULT_TOKENIZER, create_tokenizer


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Options for one split run.

    Attributes:
        tokenizer: Tokenizer strategy name.
        stemmer: Stemmer algorithm name, or `None` to skip stemming.
        normalization: Ordered normalization operations. An empty tuple keeps
            token text unchanged.
        normalize_before_tokenize: Normalize whole lines before tokenizing and
            map token positions back through the normalization offset table.
    """

    tokenizer: str = DEFAULT_TOKENIZER
    stemmer: str | None = None
    normalization: tuple[NormalizationOperation, ...] = field(
        default_factory=lambda: (Lowercase(),)
    )
    normalize_before_tokenize: bool = False

    def validate(self) -> None:
        """Validate strategy names before any line is processed.

        Raises:
            ConfigurationError: If the tokenizer or stemmer name is unknown.
        """

        create_tokenizer(self.tokenizer)
        create_stemmer(self.stemmer)


class ConfigLoader:
    """Factory methods for creating `SplitConfig` from external sources."""

    _SUPPORTED_KEYS = frozenset(
        {
            "tokenizer",
            "stemmer",
            "normalization",
            "normalize_before_tokenize",
        }
    )

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "config") -> SplitConfig:
        """Create a validated config from a plain mapping."""

        unknown = sorted(str(key) for key in payload if key not in ConfigLoader._SUPPORTED_KEYS)
        if unknown:
            raise ValueError(
                f"{source_label} contains unsupported key(s): {', '.join(unknown)}."
            )

        tokenizer = normalize_optional_string(payload.get("tokenizer")) or DEFAULT_TOKENIZER
        stemmer = normalize_optional_string(payload.get("stemmer"))
        normalization = ConfigLoader._normalization_operations(
            payload.get("normalization"), source_label
        )
        raw_before = payload.get("normalize_before_tokenize")
        normalize_before_tokenize = (
            parse_required_boolean(raw_before, "normalize_before_tokenize")
            if raw_before is not None
            else False
        )

        config = SplitConfig(
            tokenizer=tokenizer,
            stemmer=stemmer,
            normalization=normalization,
            normalize_before_tokenize=normalize_before_tokenize,
        )
        config.validate()
        return config

    @staticmethod
    def from_yaml(path: Path) -> SplitConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SplitConfig:
        """Create a validated config from `AUTHORSPLIT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        payload: dict[str, Any] = {}
        tokenizer = normalize_optional_string(env_map.get("AUTHORSPLIT_TOKENIZER"))
        if tokenizer is not None:
            payload["tokenizer"] = tokenizer
        stemmer = normalize_optional_string(env_map.get("AUTHORSPLIT_STEMMER"))
        if stemmer is not None:
            payload["stemmer"] = stemmer
        if "AUTHORSPLIT_NORMALIZATION" in env_map:
            payload["normalization"] = parse_tag_list(env_map["AUTHORSPLIT_NORMALIZATION"])
        before = normalize_optional_string(env_map.get("AUTHORSPLIT_NORMALIZE_BEFORE_TOKENIZE"))
        if before is not None:
            payload["normalize_before_tokenize"] = before

        return ConfigLoader.from_mapping(payload, source_label="environment")

    @staticmethod
    def _normalization_operations(
        value: object, source_label: str
    ) -> tuple[NormalizationOperation, ...]:
        """Parse configured normalization entries, dropping unrecognized tags."""

        if value is None:
            return (Lowercase(),)
        if isinstance(value, str):
            entries: list[object] = parse_tag_list(value)
        elif isinstance(value, (list, tuple)):
            entries = list(value)
        else:
            raise ValueError(
                f"{source_label} key `normalization` must be a list of operations."
            )

        operations: list[NormalizationOperation] = []
        for entry in entries:
            operation = operation_from_config(entry)
            if operation is not None:
                operations.append(operation)
        return tuple(operations)

