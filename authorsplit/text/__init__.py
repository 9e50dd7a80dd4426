"""Tokenization, normalization, stemming, and position-mapping components.

This package provides the building blocks the split pipeline runs per line.
"""

from .normalizer import (
    AlignedText,
    Lowercase,
    Replace,
    StripDiacritics,
    TextNormalizer,
    operation_from_config,
)
from .positions import MappedToken, PositionMapper
from .stemmers import create_stemmer, stemmer_names
from .tokenizers import DEFAULT_TOKENIZER, create_tokenizer, tokenizer_names

__all__ = [
    "AlignedText",
    "DEFAULT_TOKENIZER",
    "Lowercase",
    "MappedToken",
    "PositionMapper",
    "Replace",
    "StripDiacritics",
    "TextNormalizer",
    "create_stemmer",
    "create_tokenizer",
    "operation_from_config",
    "stemmer_names",
    "tokenizer_names",
]
