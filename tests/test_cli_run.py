from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from mutilate.cli import app

L = "[A-Za-z]"


def test_stdin_to_stdout() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--seed", "1"], input="Hello, world! 123.")
    assert result.exit_code == 0
    assert re.fullmatch(rf"{L}{{5}}, {L}{{5}}! [0-9]\.", result.stdout)


def test_in_place(tmp_path: Path) -> None:
    doc = tmp_path / "doc.typ"
    doc.write_text('#import "lib.typ": x\n// Some note\nPlain words.\n', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "-i", str(doc), "--seed", "2"])
    assert result.exit_code == 0
    assert result.stdout == ""
    lines = doc.read_text(encoding="utf-8").split("\n")
    assert lines[0] == '#import "lib.typ": x'
    assert re.fullmatch(rf"// {L}{{4}} {L}{{4}}", lines[1])
    assert re.fullmatch(rf"{L}{{5}} {L}{{5}}\.", lines[2])


def test_seed_is_reproducible() -> None:
    runner = CliRunner()
    text = "The quick brown fox jumps over the lazy dog."
    first = runner.invoke(app, ["run", "--seed", "99"], input=text)
    second = runner.invoke(app, ["run", "--seed", "99"], input=text)
    assert first.exit_code == second.exit_code == 0
    assert first.stdout == second.stdout


def test_secret_is_reproducible(monkeypatch: Any) -> None:
    monkeypatch.setenv("MUTILATE_SEED_SECRET", "unit-test-secret")
    runner = CliRunner()
    text = "The quick brown fox jumps over the lazy dog."
    first = runner.invoke(app, ["run"], input=text)
    second = runner.invoke(app, ["run"], input=text)
    assert first.exit_code == 0
    assert first.stdout == second.stdout


def test_aggressive_flag() -> None:
    runner = CliRunner()
    text = '#text("secret")'
    plain = runner.invoke(app, ["run"], input=text)
    assert plain.stdout == text
    aggressive = runner.invoke(app, ["run", "-a"], input=text)
    assert aggressive.exit_code == 0
    assert re.fullmatch(rf'#text\("{L}{{6}}"\)', aggressive.stdout)


def test_wordlist_replacements(tmp_path: Path) -> None:
    words = [f"{c}uvwx" for c in "abcdefghijklmnopqrst"]
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("\n".join(words) + "\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "-w", str(wordlist), "--seed", "5"], input="Hello world")
    assert result.exit_code == 0
    first, second = result.stdout.split(" ")
    assert first in words
    assert second in words


def test_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("aggressive: true\nseed:\n  value: 8\n", encoding="utf-8")
    runner = CliRunner()
    text = '#let s = "word"'
    first = runner.invoke(app, ["run", "--config", str(cfg)], input=text)
    second = runner.invoke(app, ["run", "--config", str(cfg)], input=text)
    assert first.exit_code == 0
    assert re.fullmatch(rf'#let s = "{L}{{4}}"', first.stdout)
    assert first.stdout == second.stdout


def test_verbose_reports_progress() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "-v", "--seed", "1"], input="Hello")
    assert result.exit_code == 0
    assert "Parsed" in result.stderr
    assert "Wrote output" in result.stderr
    assert "words for en" in result.stderr


def test_link_inside_content_block_is_written() -> None:
    runner = CliRunner()
    source = '#link("https://typst.app")[https://typst.app]\n'
    result = runner.invoke(app, ["run", "--seed", "1"], input=source)
    assert result.exit_code == 0
    assert result.stdout.startswith('#link("https://typst.app")[')
    assert result.stdout.endswith("]\n")
    assert len(result.stdout) == len(source)
