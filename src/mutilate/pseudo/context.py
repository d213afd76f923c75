"""The mutation context threaded through a document walk.

A :class:`MutationContext` owns everything word replacement needs: the
wordlist index, the hyphenator for the active language, the aggressive flag
and the pseudo-random generator.  It is built once per run by
:func:`build_context` and passed explicitly to every walker and mutilator
call.  Only the generator state changes during a walk.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from mutilate.config import ConfigModel
from mutilate.utils.logging import get_logger

from .hyphenation import Hyphenator
from .seed import rng_for_document
from .wordlist import WordlistIndex

MINIMUM_WORD_COUNT = 16

log = get_logger(__name__)


@dataclass(slots=True)
class MutationContext:
    """State shared by all replacements of one document."""

    index: WordlistIndex
    hyphenator: Hyphenator
    rng: random.Random
    aggressive: bool = False
    min_bucket_size: int = MINIMUM_WORD_COUNT

    @property
    def language(self) -> str:
        return self.hyphenator.language


def build_context(
    cfg: ConfigModel,
    *,
    words: Iterable[str] | None = None,
    text: str | None = None,
) -> MutationContext:
    """Build a :class:`MutationContext` from ``cfg``.

    Parameters
    ----------
    cfg:
        Configuration supplying language, aggressiveness, bucket threshold and
        seed.
    words:
        Candidate replacement words.  ``None`` gives an empty index, so every
        alphabetic word falls back to random letters.
    text:
        Document text, used to derive the seed when a secret is configured.

    Raises
    ------
    UnsupportedLanguageError
        If ``cfg.language`` has no hyphenation dictionary.
    """

    hyphenator = Hyphenator(cfg.language, limit=cfg.wordlist.max_syllable_length)
    if words is None:
        index = WordlistIndex.empty()
    else:
        index = WordlistIndex.build(words, hyphenator.signature)
    log.debug(
        "mutation context: language=%s aggressive=%s words=%d",
        hyphenator.language,
        cfg.aggressive,
        len(index),
    )
    return MutationContext(
        index=index,
        hyphenator=hyphenator,
        rng=rng_for_document(cfg, text=text),
        aggressive=cfg.aggressive,
        min_bucket_size=cfg.wordlist.min_bucket_size,
    )


__all__ = ["MINIMUM_WORD_COUNT", "MutationContext", "build_context"]
