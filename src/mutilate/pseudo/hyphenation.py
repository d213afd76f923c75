"""Hyphenation signatures.

A word's *signature* is the sequence of its syllable lengths as found by a
hyphenation dictionary, with every length saturated at ``limit`` (255 by
default, the 8-bit bound).  Saturation groups words whose final syllables are
all very long instead of scattering them over one-word buckets.

Dictionaries come from :mod:`pyphen`.  The language must be an ISO 639-1 code
(two ASCII letters) with an installed dictionary; anything else is rejected
when the :class:`Hyphenator` is constructed, so configuration errors surface
before any word is processed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pyphen

from mutilate.utils.errors import UnsupportedLanguageError
from mutilate.utils.logging import get_logger

MAX_SYLLABLE_LENGTH = 255

log = get_logger(__name__)


def resolve_language(code: str) -> str:
    """Return the pyphen dictionary name for the two-letter ``code``.

    Raises
    ------
    UnsupportedLanguageError
        If ``code`` is not two ASCII letters or no dictionary is installed.
    """

    if len(code) != 2 or not (code.isascii() and code.isalpha()):
        raise UnsupportedLanguageError(f"language is not two ascii letters: {code!r}")
    name = pyphen.language_fallback(code.lower())
    if name is None:
        raise UnsupportedLanguageError(f"language not supported: {code!r}")
    return name


def quantize(syllables: Iterable[str], limit: int = MAX_SYLLABLE_LENGTH) -> tuple[int, ...]:
    """Return the syllable lengths of ``syllables`` saturated at ``limit``."""

    return tuple(min(len(syllable), limit) for syllable in syllables)


class Hyphenator:
    """Split words into syllables for one language."""

    def __init__(self, language: str, *, limit: int = MAX_SYLLABLE_LENGTH) -> None:
        if not 1 <= limit <= MAX_SYLLABLE_LENGTH:
            raise ValueError(f"limit must be between 1 and {MAX_SYLLABLE_LENGTH}")
        self.language: str = language.lower()
        self.dictionary: str = resolve_language(language)
        self.limit = limit
        self._pyphen = pyphen.Pyphen(lang=self.dictionary)
        log.debug("hyphenation dictionary %s for language %s", self.dictionary, self.language)

    def syllables(self, word: str) -> list[str]:
        """Return ``word`` split at its hyphenation points."""

        cuts: Sequence[int] = self._pyphen.positions(word)
        parts: list[str] = []
        last = 0
        for cut in cuts:
            parts.append(word[last:cut])
            last = cut
        parts.append(word[last:])
        return parts

    def signature(self, word: str) -> tuple[int, ...]:
        """Return the saturated syllable-length signature of ``word``."""

        return quantize(self.syllables(word), self.limit)

    __call__ = signature


__all__ = ["MAX_SYLLABLE_LENGTH", "Hyphenator", "quantize", "resolve_language"]
