"""Replace the words of a markup document with same-shape garbage.

The document is parsed into a syntax tree (:mod:`mutilate.syntax`), walked by
:mod:`mutilate.replace`, and every eligible word is swapped for a substitute
chosen by :mod:`mutilate.pseudo` from a wordlist indexed by length and
hyphenation signature.  Whitespace, punctuation, comment markers, raw-block
fences and module directives survive unchanged.
"""

from .pseudo.context import MutationContext, build_context
from .replace.walker import mutilate_document
from .syntax import parse

__version__ = "0.1.0"

__all__ = ["MutationContext", "__version__", "build_context", "mutilate_document", "parse"]
