"""Seeding helpers for the mutation generator.

Three sources are supported, in order of precedence:

1. An explicit integer seed (``seed.value`` or ``--seed``) yields
   ``random.Random(seed)``.
2. A secret from the environment variable named by ``seed.secret_env``
   yields a generator seeded with ``HMAC-SHA256(secret, namespace ||
   BLAKE2b(document))``.  The same secret and document always produce the
   same output while different documents get unrelated streams.
3. Otherwise the generator is seeded from operating system entropy.

Security notes
--------------
The secret and the derived digests are never logged or exposed.
"""

from __future__ import annotations

import hashlib
import hmac
import random
from typing import Final

from mutilate.config import ConfigModel

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_RNG: Final = b"mutilate/v1/rng"


# ---------------------------------------------------------------------------
# Document hashing
# ---------------------------------------------------------------------------


def doc_hash(text: str) -> bytes:
    """Return a 32-byte BLAKE2b digest of the raw document text."""

    return hashlib.blake2b(text.encode("utf-8"), digest_size=32).digest()


# ---------------------------------------------------------------------------
# Secret extraction
# ---------------------------------------------------------------------------


def get_secret_bytes(cfg: ConfigModel) -> bytes:
    """Return the seed secret as bytes, or ``b""`` when none is configured."""

    secret = cfg.seed.secret
    if secret is None:
        return b""
    return secret.get_secret_value().encode("utf-8")


# ---------------------------------------------------------------------------
# Reproducible RNG
# ---------------------------------------------------------------------------


def seed_for_document(cfg: ConfigModel, *, text: str | None) -> int | None:
    """Return the integer seed for ``text`` or ``None`` for an entropy seed.

    ``text`` is only consulted when a secret is configured; it is required in
    that case.
    """

    if cfg.seed.value is not None:
        return cfg.seed.value
    secret = get_secret_bytes(cfg)
    if not secret:
        return None
    if text is None:
        raise ValueError("Document text required to derive a secret-based seed")
    digest = hmac.new(secret, _NS_RNG + doc_hash(text), hashlib.sha256).digest()
    return int.from_bytes(digest, "big")


def rng_for_document(cfg: ConfigModel, *, text: str | None = None) -> random.Random:
    """Return the generator used to mutilate ``text``."""

    return random.Random(seed_for_document(cfg, text=text))


__all__ = ["doc_hash", "get_secret_bytes", "seed_for_document", "rng_for_document"]
