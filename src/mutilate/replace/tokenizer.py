"""Split text into word and separator runs.

A *word* is a maximal run of alphabetic or numeric characters in the Unicode
sense.  Combining vowel signs count as alphabetic, so words of Indic and
similar scripts stay whole; the underscore does not count.  Everything
between words is a separator run and is reproduced exactly.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

import regex

from mutilate.pseudo.context import MutationContext
from mutilate.pseudo.word import mutilate_word

_WORD_SPLIT_RE = regex.compile(r"([\p{Alphabetic}\p{N}]+)")


def iter_runs(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_word, run)`` pairs covering ``text`` in order.

    Empty separator runs are skipped, so an empty ``text`` yields nothing.
    """

    for position, run in enumerate(_WORD_SPLIT_RE.split(text)):
        if run:
            yield position % 2 == 1, run


def mutilate_text(text: str, context: MutationContext, output: TextIO) -> None:
    """Write ``text`` to ``output`` with every word replaced."""

    for is_word, run in iter_runs(text):
        output.write(mutilate_word(run, context) if is_word else run)


__all__ = ["iter_runs", "mutilate_text"]
