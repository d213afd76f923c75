"""Wordlist index.

Replacement words are looked up by shape.  :class:`WordlistIndex` groups the
words of a wordlist twice: by character length and by hyphenation signature
(see :mod:`mutilate.pseudo.hyphenation`).  Each word lands in exactly one
bucket of each mapping, buckets keep the order of the source list, and the
index never changes after :meth:`WordlistIndex.build` returns.  Stable order
matters: with a seeded generator the same wordlist must yield the same draws.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from mutilate.utils.logging import get_logger

Signature = tuple[int, ...]
SignatureFunc = Callable[[str], Signature]
K = TypeVar("K")

log = get_logger(__name__)


def _freeze(buckets: dict[K, list[str]]) -> Mapping[K, tuple[str, ...]]:
    return MappingProxyType({key: tuple(words) for key, words in buckets.items()})


@dataclass(frozen=True, slots=True)
class WordlistIndex:
    """Immutable lookup of candidate words by length and by signature."""

    by_length: Mapping[int, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    by_signature: Mapping[Signature, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def empty(cls) -> "WordlistIndex":
        """Return an index without any words."""

        return cls()

    @classmethod
    def build(cls, words: Iterable[str], signature: SignatureFunc) -> "WordlistIndex":
        """Index ``words`` in a single pass.

        Parameters
        ----------
        words:
            Candidate words in source order.  Duplicates are kept; they weigh
            the draw like any other entry.
        signature:
            Callable returning the hyphenation signature of a word, usually a
            :class:`~mutilate.pseudo.hyphenation.Hyphenator`.
        """

        by_length: dict[int, list[str]] = {}
        by_signature: dict[Signature, list[str]] = {}
        count = 0
        for word in words:
            by_length.setdefault(len(word), []).append(word)
            by_signature.setdefault(signature(word), []).append(word)
            count += 1
        log.debug(
            "indexed %d words into %d length and %d signature buckets",
            count,
            len(by_length),
            len(by_signature),
        )
        return cls(_freeze(by_length), _freeze(by_signature))

    def __len__(self) -> int:
        return sum(len(words) for words in self.by_length.values())

    def length_bucket(self, length: int) -> tuple[str, ...]:
        return self.by_length.get(length, ())

    def signature_bucket(self, signature: Signature) -> tuple[str, ...]:
        return self.by_signature.get(signature, ())


__all__ = ["Signature", "SignatureFunc", "WordlistIndex"]
