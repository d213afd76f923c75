"""Word replacement: hyphenation signatures, wordlist index and seeding."""

from .context import MINIMUM_WORD_COUNT, MutationContext, build_context
from .hyphenation import Hyphenator, quantize, resolve_language
from .seed import doc_hash, get_secret_bytes, rng_for_document, seed_for_document
from .word import CHARSET_DIGITS, CHARSET_TEXT, mutilate_word
from .wordlist import WordlistIndex

__all__ = [
    "CHARSET_DIGITS",
    "CHARSET_TEXT",
    "MINIMUM_WORD_COUNT",
    "Hyphenator",
    "MutationContext",
    "WordlistIndex",
    "build_context",
    "doc_hash",
    "get_secret_bytes",
    "mutilate_word",
    "quantize",
    "resolve_language",
    "rng_for_document",
    "seed_for_document",
]
