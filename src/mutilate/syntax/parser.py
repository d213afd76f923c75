"""Recursive descent parser for Typst-style markup.

The parser understands the subset of the language needed to tell prose from
structure: markup text, comments, raw blocks, links, labels and references,
equations, content blocks and embedded code (``#expr``) with its strings,
groups and ``import``/``include`` directives.  Everything it does not
classify further is kept as verbatim ``CODE`` or ``TEXT`` leaves, so the
concatenated leaves of the returned tree always equal the input.

Errors never abort parsing.  They are collected as :class:`Diagnostic`
objects and the offending text is kept in an ``ERROR`` leaf.
"""

from __future__ import annotations

import re

from .kinds import SyntaxKind
from .node import Diagnostic, SyntaxNode

_IDENT_RE = re.compile(r"[^\W\d][\w-]*")
_NUMBER_RE = re.compile(r"\d[\w.]*")
_SPACE_RE = re.compile(r"\s+")
_INLINE_SPACE_RE = re.compile(r"[^\S\r\n]+")
_LINE_COMMENT_RE = re.compile(r"//[^\r\n]*")
_MARKUP_TEXT_RE = re.compile(r"(?:[^\s\\`#\[\]$<@/]|/(?![/*]))+")
_CODE_OP_RE = re.compile(r"(?:[^\s\w\"`\[\](){}$;/]|/(?![/*]))+")
_LINK_RE = re.compile(r"https?://[^\s\[\]<>\"()]+")
_LABEL_RE = re.compile(r"<[\w\-.:]+>")
_REF_RE = re.compile(r"@\w(?:[\w\-.:]*[\w\-])?")

_LINK_TRAILING = ".,;:!?'"
_CLOSERS = frozenset(")]}")
_STATEMENT_KEYWORDS = frozenset(
    {"let", "set", "show", "if", "for", "while", "context", "return", "break", "continue"}
)
_DIRECTIVES = {
    "import": SyntaxKind.MODULE_IMPORT,
    "include": SyntaxKind.MODULE_INCLUDE,
}


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.diagnostics: list[Diagnostic] = []

    # -- helpers -------------------------------------------------------------

    def _error(self, start: int, end: int, message: str) -> None:
        self.diagnostics.append(Diagnostic(start, end, message))

    def _take(self, kind: SyntaxKind, end: int, *, lang: str | None = None) -> SyntaxNode:
        node = SyntaxNode.leaf(kind, self.text[self.pos : end], lang=lang)
        self.pos = end
        return node

    def _at(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def _after_alnum(self) -> bool:
        return self.pos > 0 and self.text[self.pos - 1].isalnum()

    def _string_end(self, start: int) -> int | None:
        """Return the offset after the string literal opening at ``start``."""

        text = self.text
        i = start + 1
        while i < len(text):
            c = text[i]
            if c == "\\":
                i += 2
                continue
            if c == '"':
                return i + 1
            i += 1
        return None

    # -- markup mode ---------------------------------------------------------

    def markup(self, closer: str | None = None) -> list[SyntaxNode]:
        text = self.text
        nodes: list[SyntaxNode] = []
        while self.pos < len(text):
            c = text[self.pos]
            if c == "]":
                if closer == "]":
                    break
                self._error(self.pos, self.pos + 1, "unexpected closing bracket")
                nodes.append(self._take(SyntaxKind.ERROR, self.pos + 1))
                continue

            node = self._shared()
            if node is not None:
                nodes.append(node)
            elif c.isspace():
                match = _SPACE_RE.match(text, self.pos)
                assert match is not None
                nodes.append(self._take(SyntaxKind.SPACE, match.end()))
            elif c == "\\":
                nodes.append(self._escape())
            elif c == "#":
                nodes.append(self._embed())
            else:
                nodes.append(self._markup_word())
        return nodes

    def _markup_word(self) -> SyntaxNode:
        text = self.text
        start = self.pos
        c = text[start]
        if c == "<":
            match = _LABEL_RE.match(text, start)
            if match:
                return self._take(SyntaxKind.LABEL, match.end())
        elif c == "@" and not self._after_alnum():
            match = _REF_RE.match(text, start)
            if match:
                return self._take(SyntaxKind.REF, match.end())

        link = _LINK_RE.match(text, start)
        if link:
            end = link.end()
            while end > start + 1 and text[end - 1] in _LINK_TRAILING:
                end -= 1
            return self._take(SyntaxKind.LINK, end)

        match = _MARKUP_TEXT_RE.match(text, start)
        end = match.end() if match else start + 1
        # A link may start inside a text run.
        i = text.find("http", start + 1, end)
        while i != -1:
            if _LINK_RE.match(text, i):
                end = i
                break
            i = text.find("http", i + 1, end)
        return self._take(SyntaxKind.TEXT, end)

    def _escape(self) -> SyntaxNode:
        text = self.text
        start = self.pos
        if start + 1 >= len(text) or text[start + 1].isspace():
            return self._take(SyntaxKind.LINEBREAK, start + 1)
        if text.startswith("u{", start + 1):
            close = text.find("}", start + 3)
            if close == -1:
                self._error(start, len(text), "unclosed unicode escape")
                return self._take(SyntaxKind.ERROR, len(text))
            return self._take(SyntaxKind.ESCAPE, close + 1)
        return self._take(SyntaxKind.ESCAPE, start + 2)

    # -- constructs valid in markup and code ---------------------------------

    def _shared(self) -> SyntaxNode | None:
        c = self.text[self.pos]
        if self._at("//"):
            match = _LINE_COMMENT_RE.match(self.text, self.pos)
            assert match is not None
            return self._take(SyntaxKind.LINE_COMMENT, match.end())
        if self._at("/*"):
            return self._block_comment()
        if c == "`":
            return self._raw()
        if c == "[":
            return self._content_block()
        if c == "$":
            return self._equation()
        return None

    def _block_comment(self) -> SyntaxNode:
        text = self.text
        start = self.pos
        depth = 0
        i = start
        while i < len(text):
            if text.startswith("/*", i):
                depth += 1
                i += 2
            elif text.startswith("*/", i):
                depth -= 1
                i += 2
                if depth == 0:
                    return self._take(SyntaxKind.BLOCK_COMMENT, i)
            else:
                i += 1
        self._error(start, len(text), "unclosed block comment")
        return self._take(SyntaxKind.ERROR, len(text))

    def _raw(self) -> SyntaxNode:
        text = self.text
        start = self.pos
        fence_end = start
        while fence_end < len(text) and text[fence_end] == "`":
            fence_end += 1
        count = fence_end - start
        if count == 2:
            return self._take(SyntaxKind.RAW, fence_end)

        lang = None
        body_start = fence_end
        if count >= 3:
            match = _IDENT_RE.match(text, fence_end)
            if match:
                lang = match.group()
                body_start = match.end()
        close = text.find("`" * count, body_start)
        if close == -1:
            self._error(start, len(text), "unclosed raw text")
            return self._take(SyntaxKind.ERROR, len(text))
        return self._take(SyntaxKind.RAW, close + count, lang=lang)

    def _equation(self) -> SyntaxNode:
        text = self.text
        start = self.pos
        i = start + 1
        while i < len(text):
            c = text[i]
            if c == "\\":
                i += 2
                continue
            if c == "$":
                return self._take(SyntaxKind.EQUATION, i + 1)
            i += 1
        self._error(start, len(text), "unclosed equation")
        return self._take(SyntaxKind.ERROR, len(text))

    def _content_block(self) -> SyntaxNode:
        start = self.pos
        children = [self._take(SyntaxKind.DELIM, start + 1)]
        inner = self.markup("]")
        if inner:
            children.append(SyntaxNode.inner(SyntaxKind.MARKUP, inner))
        if self._at("]"):
            children.append(self._take(SyntaxKind.DELIM, self.pos + 1))
        else:
            self._error(start, start + 1, "unclosed delimiter")
        return SyntaxNode.inner(SyntaxKind.CONTENT_BLOCK, children)

    # -- code mode -----------------------------------------------------------

    def _embed(self) -> SyntaxNode:
        text = self.text
        children = [self._take(SyntaxKind.HASH, self.pos + 1)]
        c = text[self.pos] if self.pos < len(text) else ""
        ident = _IDENT_RE.match(text, self.pos)
        if ident:
            word = ident.group()
            if word in _DIRECTIVES:
                children.append(self._directive(word))
            elif word in _STATEMENT_KEYWORDS:
                children.append(self._take(SyntaxKind.CODE, ident.end()))
                children.extend(self.code(None, statement=True))
            else:
                children.append(self._take(SyntaxKind.CODE, ident.end()))
                children.extend(self._postfix())
        elif c == "{":
            children.append(self._group(SyntaxKind.CODE_BLOCK, "}"))
        elif c == "(":
            children.append(self._group(SyntaxKind.GROUP, ")"))
            children.extend(self._postfix())
        elif c == "[":
            children.append(self._content_block())
        elif c == '"':
            children.append(self._string())
        elif c.isdigit():
            match = _NUMBER_RE.match(text, self.pos)
            assert match is not None
            children.append(self._take(SyntaxKind.CODE, match.end()))
        else:
            self._error(self.pos - 1, self.pos, "expected expression after #")

        if self._at(";"):
            children.append(self._take(SyntaxKind.CODE, self.pos + 1))
        return SyntaxNode.inner(SyntaxKind.EMBED, children)

    def _postfix(self) -> list[SyntaxNode]:
        """Parse calls, trailing content blocks and field accesses."""

        text = self.text
        nodes: list[SyntaxNode] = []
        while self.pos < len(text):
            c = text[self.pos]
            if c == "(":
                nodes.append(self._group(SyntaxKind.GROUP, ")"))
            elif c == "[":
                nodes.append(self._content_block())
            elif c == "." and _IDENT_RE.match(text, self.pos + 1):
                field = _IDENT_RE.match(text, self.pos + 1)
                assert field is not None
                nodes.append(self._take(SyntaxKind.CODE, self.pos + 1))
                nodes.append(self._take(SyntaxKind.CODE, field.end()))
            else:
                break
        return nodes

    def _group(self, kind: SyntaxKind, closer: str) -> SyntaxNode:
        start = self.pos
        children = [self._take(SyntaxKind.DELIM, start + 1)]
        children.extend(self.code(closer))
        if self._at(closer):
            children.append(self._take(SyntaxKind.DELIM, self.pos + 1))
        else:
            self._error(start, start + 1, "unclosed delimiter")
        return SyntaxNode.inner(kind, children)

    def code(self, closer: str | None, *, statement: bool = False) -> list[SyntaxNode]:
        """Parse code until ``closer``.

        In ``statement`` mode parsing also stops before a line break, a
        semicolon or a closing bracket owned by an enclosing scope.
        """

        text = self.text
        nodes: list[SyntaxNode] = []
        while self.pos < len(text):
            c = text[self.pos]
            if c == closer:
                break
            if c in _CLOSERS:
                if statement:
                    break
                self._error(self.pos, self.pos + 1, "unexpected closing delimiter")
                nodes.append(self._take(SyntaxKind.ERROR, self.pos + 1))
                continue
            if statement and c in "\r\n;":
                break

            node = self._shared()
            if node is not None:
                nodes.append(node)
            elif c.isspace():
                match = (_INLINE_SPACE_RE if statement else _SPACE_RE).match(text, self.pos)
                assert match is not None
                nodes.append(self._take(SyntaxKind.SPACE, match.end()))
            elif c == "(":
                nodes.append(self._group(SyntaxKind.GROUP, ")"))
            elif c == "{":
                nodes.append(self._group(SyntaxKind.CODE_BLOCK, "}"))
            elif c == '"':
                nodes.append(self._string())
            else:
                ident = _IDENT_RE.match(text, self.pos)
                if ident and ident.group() in _DIRECTIVES:
                    nodes.append(self._directive(ident.group()))
                    continue
                match = ident or _NUMBER_RE.match(text, self.pos) or _CODE_OP_RE.match(text, self.pos)
                end = match.end() if match else self.pos + 1
                nodes.append(self._take(SyntaxKind.CODE, end))
        return nodes

    def _string(self) -> SyntaxNode:
        end = self._string_end(self.pos)
        if end is None:
            self._error(self.pos, len(self.text), "unclosed string")
            return self._take(SyntaxKind.ERROR, len(self.text))
        return self._take(SyntaxKind.STR, end)

    def _directive(self, keyword: str) -> SyntaxNode:
        """Scan an ``import``/``include`` directive to the end of its line."""

        text = self.text
        start = self.pos
        depth = 0
        i = start + len(keyword)
        while i < len(text):
            c = text[i]
            if c == '"':
                end = self._string_end(i)
                if end is None:
                    self._error(i, len(text), "unclosed string")
                    i = len(text)
                    break
                i = end
                continue
            if c in "([{":
                depth += 1
            elif c in _CLOSERS:
                if depth == 0:
                    break
                depth -= 1
            elif depth == 0 and c in "\r\n;":
                break
            i += 1
        end = i
        while end > start + len(keyword) and text[end - 1] in " \t":
            end -= 1
        return self._take(_DIRECTIVES[keyword], end)


def parse(text: str) -> tuple[SyntaxNode, list[Diagnostic]]:
    """Parse ``text`` into a ``MARKUP`` root node and a list of diagnostics.

    The concatenated leaf text of the returned tree equals ``text``.
    """

    parser = _Parser(text)
    nodes = parser.markup()
    return SyntaxNode.inner(SyntaxKind.MARKUP, nodes), parser.diagnostics


__all__ = ["parse"]
