"""Line-oriented wordlist reader.

One candidate word per line.  Surrounding whitespace is stripped and blank
lines are skipped; order is preserved because it decides which word a seeded
draw returns.
"""

from __future__ import annotations

import os


def read_wordlist(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> list[str]:
    """Return the words listed in ``path``.

    ``OSError`` and ``UnicodeDecodeError`` propagate to the caller.
    """

    words: list[str] = []
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return words


__all__ = ["read_wordlist"]
