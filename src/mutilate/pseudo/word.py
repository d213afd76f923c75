"""Shape-preserving replacement of single words.

:func:`mutilate_word` picks a substitute for one alphanumeric word, trying
progressively broader strategies:

1. words made only of numeric characters (Unicode category N) collapse to
   one random digit; numeral ideographs such as ``三`` are letters, not digits;
2. a random word with the same hyphenation signature;
3. a random word with the same length;
4. random ASCII letters, one per character of the original.

A bucket is only sampled when it holds at least ``min_bucket_size`` words, so
a rare shape does not keep mapping to the same one or two replacements.  The
last strategy always succeeds, so replacement never fails.
"""

from __future__ import annotations

import string
import unicodedata
from collections.abc import Sequence

from .context import MutationContext

CHARSET_TEXT: str = string.ascii_lowercase + string.ascii_uppercase
CHARSET_DIGITS: str = string.digits


def _is_numeric(word: str) -> bool:
    return all(unicodedata.category(ch)[0] == "N" for ch in word)


def _sample(words: Sequence[str], context: MutationContext) -> str | None:
    if len(words) < context.min_bucket_size:
        return None
    return context.rng.choice(words)


def mutilate_word(word: str, context: MutationContext) -> str:
    """Return a replacement for ``word`` drawn with ``context.rng``."""

    if _is_numeric(word):
        # Numbers are not length preserving: any run becomes a single digit.
        return context.rng.choice(CHARSET_DIGITS)

    signature = context.hyphenator.signature(word)
    replacement = _sample(context.index.signature_bucket(signature), context)
    if replacement is not None:
        return replacement

    replacement = _sample(context.index.length_bucket(len(word)), context)
    if replacement is not None:
        return replacement

    return "".join(context.rng.choice(CHARSET_TEXT) for _ in word)


__all__ = ["CHARSET_DIGITS", "CHARSET_TEXT", "mutilate_word"]
