from __future__ import annotations

import pytest

from mutilate.syntax import SyntaxKind, SyntaxNode, parse

SAMPLE = """#import "template.typ": conf, title
#show: conf.with(title: "A Paper")

= Introduction <intro>
Some *bold* and _emph_ text, see @intro and https://typst.app.
// a line comment
/* a /* nested */ block */
#let name = "Ferris"
#strong[Hello #name!] \\# \\u{1F600} \\
```rust
fn main() {}
```
Inline `raw` and $x + y$.
#{
  import "util.typ"
  let x = (1, 2)
  [content in code]
}
#include "chapter.typ"
"""


def leaves_of(tree: SyntaxNode, kind: SyntaxKind) -> list[SyntaxNode]:
    return [leaf for leaf in tree.leaves() if leaf.kind is kind]


def parse_clean(text: str) -> SyntaxNode:
    tree, diagnostics = parse(text)
    assert diagnostics == []
    return tree


def test_leaves_reproduce_source() -> None:
    tree = parse_clean(SAMPLE)
    assert tree.kind is SyntaxKind.MARKUP
    assert tree.full_text() == SAMPLE


def test_empty_document() -> None:
    tree = parse_clean("")
    assert tree.full_text() == ""
    assert tree.children == ()


def test_module_directives() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.MODULE_IMPORT)] == [
        'import "template.typ": conf, title',
        'import "util.typ"',
    ]
    assert [n.text for n in leaves_of(tree, SyntaxKind.MODULE_INCLUDE)] == [
        'include "chapter.typ"'
    ]


def test_comments() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.LINE_COMMENT)] == ["// a line comment"]
    assert [n.text for n in leaves_of(tree, SyntaxKind.BLOCK_COMMENT)] == [
        "/* a /* nested */ block */"
    ]


def test_strings_only_in_code() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.STR)] == ['"A Paper"', '"Ferris"']
    markup_quotes = parse_clean('He said "hi".')
    assert leaves_of(markup_quotes, SyntaxKind.STR) == []


def test_raw_blocks() -> None:
    tree = parse_clean(SAMPLE)
    raws = leaves_of(tree, SyntaxKind.RAW)
    assert [n.text for n in raws] == ["```rust\nfn main() {}\n```", "`raw`"]
    assert [n.lang for n in raws] == ["rust", None]


def test_raw_without_language_and_empty_raw() -> None:
    tree = parse_clean("```\ncode\n``` and ``")
    raws = leaves_of(tree, SyntaxKind.RAW)
    assert [n.text for n in raws] == ["```\ncode\n```", "``"]
    assert [n.lang for n in raws] == [None, None]


def test_link_strips_trailing_punctuation() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.LINK)] == ["https://typst.app"]


def test_link_inside_text_run() -> None:
    tree = parse_clean("(https://example.com/a)")
    assert [n.text for n in leaves_of(tree, SyntaxKind.LINK)] == ["https://example.com/a"]


def test_labels_refs_escapes() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.LABEL)] == ["<intro>"]
    assert [n.text for n in leaves_of(tree, SyntaxKind.REF)] == ["@intro"]
    assert [n.text for n in leaves_of(tree, SyntaxKind.ESCAPE)] == ["\\#", "\\u{1F600}"]
    assert [n.text for n in leaves_of(tree, SyntaxKind.LINEBREAK)] == ["\\"]


def test_email_is_not_a_reference() -> None:
    tree = parse_clean("mail a@b.org")
    assert leaves_of(tree, SyntaxKind.REF) == []


def test_equation_is_one_leaf() -> None:
    tree = parse_clean(SAMPLE)
    assert [n.text for n in leaves_of(tree, SyntaxKind.EQUATION)] == ["$x + y$"]


def test_statement_ends_at_line_break() -> None:
    tree = parse_clean("#let x = 1\nHello")
    embed, *rest = tree.children
    assert embed.kind is SyntaxKind.EMBED
    assert embed.full_text() == "#let x = 1"
    assert [n.text for n in rest] == ["\n", "Hello"]
    assert rest[1].kind is SyntaxKind.TEXT


def test_call_with_trailing_content_block() -> None:
    tree = parse_clean("#strong[Hello world]!")
    embed = tree.children[0]
    assert embed.kind is SyntaxKind.EMBED
    assert [c.kind for c in embed.children] == [
        SyntaxKind.HASH,
        SyntaxKind.CODE,
        SyntaxKind.CONTENT_BLOCK,
    ]
    block = embed.children[2]
    assert [n.text for n in leaves_of(block, SyntaxKind.TEXT)] == ["Hello", "world"]
    assert tree.children[1].text == "!"


def test_field_access_stops_before_sentence_end() -> None:
    tree = parse_clean("See #name.")
    embed = tree.children[-2]
    assert embed.full_text() == "#name"
    assert tree.children[-1].text == "."


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("/* open", "unclosed block comment"),
        ("```py\nprint(1)", "unclosed raw text"),
        ('#f("x', "unclosed string"),
        ("oops ]", "unexpected closing bracket"),
        ("#[abc", "unclosed delimiter"),
        ("# x", "expected expression after #"),
        ("$x", "unclosed equation"),
        ("#f(1]", "unexpected closing delimiter"),
    ],
)
def test_diagnostics(text: str, message: str) -> None:
    tree, diagnostics = parse(text)
    assert message in [d.message for d in diagnostics]
    assert tree.full_text() == text


def test_diagnostic_offsets() -> None:
    _, diagnostics = parse("ok ]")
    assert len(diagnostics) == 1
    assert (diagnostics[0].start, diagnostics[0].end) == (3, 4)
    assert str(diagnostics[0]) == "3..4: unexpected closing bracket"


def test_node_holds_text_or_children() -> None:
    leaf = SyntaxNode.leaf(SyntaxKind.TEXT, "x")
    with pytest.raises(ValueError):
        SyntaxNode(SyntaxKind.MARKUP, "x", (leaf,))
    with pytest.raises(ValueError):
        SyntaxNode.leaf(SyntaxKind.MARKUP, "x")
