"""Named stemmer strategies.

Responsibilities:
- Reduce a normalized token to its stem under a named algorithm.
- Keep the pipeline independent from concrete `nltk` stemmer construction.
"""

from __future__ import annotations

from typing import Protocol

from nltk.stem import LancasterStemmer, PorterStemmer

from ..errors import ConfigurationError


class Stemmer(Protocol):
    """Protocol for stemmer strategies."""

    name: str

    def stem(self, text: str) -> str:
        """Return the stem of a normalized token."""


class PorterTokenStemmer:
    """Porter's original suffix-stripping algorithm ("one" -> "on")."""

    name = "porter"

    def __init__(self) -> None:
        self._stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)

    def stem(self, text: str) -> str:
        if not text:
            return text
        return self._stemmer.stem(text, to_lowercase=False)


class LancasterTokenStemmer:
    """Lancaster (Paice/Husk) stemmer, more aggressive than Porter."""

    name = "lancaster"

    def __init__(self) -> None:
        self._stemmer = LancasterStemmer()

    def stem(self, text: str) -> str:
        if not text:
            return text
        return self._stemmer.stem(text)


_STEMMERS: dict[str, type] = {
    PorterTokenStemmer.name: PorterTokenStemmer,
    LancasterTokenStemmer.name: LancasterTokenStemmer,
}


def stemmer_names() -> list[str]:
    """Return supported stemmer names in registration order."""

    return list(_STEMMERS)


def create_stemmer(name: str | None) -> Stemmer | None:
    """Create a stemmer for a configured name, or `None` when none is configured.

    Raises:
        ConfigurationError: If `name` is not a known algorithm.
    """

    if name is None or not name.strip():
        return None
    stemmer_type = _STEMMERS.get(name.strip().lower())
    if stemmer_type is None:
        raise ConfigurationError(
            kind="stemmer",
            name=name,
            hint=f"Supported stemmers: {', '.join(stemmer_names())}.",
        )
    return stemmer_type()
