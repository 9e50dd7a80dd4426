"""Named tokenizer strategies.

Responsibilities:
- Split a line into an ordered list of substrings under a named strategy.
- Guarantee every emitted substring is literally present in the input, so
  positions can be recovered by forward search.

Notes:
- Strategies wrap `nltk` tokenizers; none of them needs downloaded corpora.
- Treebank output is read through `span_tokenize` because the plain Treebank
  tokenizer rewrites double quotes into ```` and `''`.
"""

from __future__ import annotations

from typing import Protocol

from nltk.tokenize import RegexpTokenizer, TreebankWordTokenizer, WordPunctTokenizer

from ..errors import ConfigurationError

DEFAULT_TOKENIZER = "word-punctuation-split"


class Tokenizer(Protocol):
    """Protocol for tokenizer strategies."""

    name: str

    def tokenize(self, text: str) -> list[str]:
        """Split text into ordered substrings."""


class WordPunctuationTokenizer:
    """Split into runs of word characters and runs of punctuation."""

    name = "word-punctuation-split"

    def __init__(self) -> None:
        self._tokenizer = WordPunctTokenizer()

    def tokenize(self, text: str) -> list[str]:
        return [piece for piece in self._tokenizer.tokenize(text) if piece]


class TreebankTokenizer:
    """Penn Treebank conventions: contractions and punctuation split off words."""

    name = "treebank"

    def __init__(self) -> None:
        self._tokenizer = TreebankWordTokenizer()

    def tokenize(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self._tokenizer.span_tokenize(text) if end > start]


class PlainWordTokenizer:
    """Keep runs of word characters and drop everything else."""

    name = "plain-word"

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(r"\w+")

    def tokenize(self, text: str) -> list[str]:
        return [piece for piece in self._tokenizer.tokenize(text) if piece]


class AggressivePunctuationTokenizer:
    """Break on every run of non-word characters."""

    name = "aggressive-punctuation"

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(r"\W+", gaps=True, discard_empty=True)

    def tokenize(self, text: str) -> list[str]:
        return [piece for piece in self._tokenizer.tokenize(text) if piece]


_TOKENIZERS: dict[str, type] = {
    WordPunctuationTokenizer.name: WordPunctuationTokenizer,
    TreebankTokenizer.name: TreebankTokenizer,
    PlainWordTokenizer.name: PlainWordTokenizer,
    AggressivePunctuationTokenizer.name: AggressivePunctuationTokenizer,
}

_ALIASES = {
    "wordpunct": WordPunctuationTokenizer.name,
    "word": PlainWordTokenizer.name,
    "aggressive": AggressivePunctuationTokenizer.name,
}


def tokenizer_names() -> list[str]:
    """Return canonical tokenizer names in registration order."""

    return list(_TOKENIZERS)


def create_tokenizer(name: str | None = None) -> Tokenizer:
    """Create a tokenizer for a configured strategy name.

    Raises:
        ConfigurationError: If `name` is not a known strategy.
    """

    key = (name or DEFAULT_TOKENIZER).strip().lower()
    key = _ALIASES.get(key, key)
    tokenizer_type = _TOKENIZERS.get(key)
    if tokenizer_type is None:
        raise ConfigurationError(
            kind="tokenizer",
            name=str(name),
            hint=f"Supported tokenizers: {', '.join(tokenizer_names())}.",
        )
    return tokenizer_type()
