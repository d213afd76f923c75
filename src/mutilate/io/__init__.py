"""Document and wordlist I/O.

Documents are read from a named file or, when no path is given, from
standard input, and written back the same way.  No content normalization
takes place: files are opened with ``newline=""`` so ``\\n``, ``\\r\\n`` and
``\\r`` survive the round trip unchanged, and a UTF-8 byte-order mark is
consumed on input by the default ``"utf-8-sig"`` codec.

Undecodable input is reported as :class:`~mutilate.utils.errors.IOFormatError`;
other ``OSError`` subclasses propagate unchanged.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from ..utils.errors import IOFormatError
from .readers.wordlist_reader import read_wordlist

PathLikeStr = os.PathLike[str]


def read_text(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> str:
    """Read a plain-text file as-is."""

    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text(path: str | PathLikeStr, text: str, *, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path`` exactly as provided, creating parent directories."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def read_document(
    path: str | PathLikeStr | None,
    *,
    encoding: str = "utf-8-sig",
    stdin: TextIO | None = None,
) -> str:
    """Read the whole document from ``path`` or from standard input."""

    try:
        if path is None:
            return (stdin or sys.stdin).read()
        return read_text(path, encoding=encoding)
    except UnicodeDecodeError as exc:
        source = "<stdin>" if path is None else os.fspath(path)
        raise IOFormatError(f"{source}: cannot decode as {encoding}: {exc.reason}") from exc


def write_document(
    path: str | PathLikeStr | None,
    text: str,
    *,
    encoding: str = "utf-8",
    stdout: TextIO | None = None,
) -> None:
    """Write ``text`` to ``path`` or to standard output."""

    if path is None:
        stream = stdout or sys.stdout
        stream.write(text)
        stream.flush()
        return
    write_text(path, text, encoding=encoding)


__all__ = ["read_document", "read_wordlist", "write_document", "read_text", "write_text"]
