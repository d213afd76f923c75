"""Typer-based command line interface for document mutilation.

The ``run`` command reads a document from a file or standard input, replaces
every word with a same-shape substitute and writes the result back in place
or to standard output.  Failures are all-or-nothing: when any step fails no
output is written.

Exit codes
----------
0 success
3 I/O error (unreadable input, unwritable output)
4 configuration error (bad config, unsupported language, unreadable wordlist)
5 document syntax error (diagnostics printed to stderr)
6 verification failure (``--strict`` only, mutilated output no longer parses;
  without it the problems are reported and the output is written anyway)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer

from .config import ConfigModel, load_config
from .io import read_document, read_wordlist, write_document
from .pseudo.context import build_context
from .replace.walker import mutilate_tree
from .syntax import parse
from .utils.errors import ConfigurationError, IOFormatError
from .utils.logging import configure_logging
from .verify import scanner

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="mutilate",
    help="Replace every word of a document with random garbage. Use 'mutilate run'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    language: str | None,
    aggressive: bool | None,
    wordlist: Path | None,
    seed: int | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if language is not None:
        new_cfg.language = language
    if aggressive is not None:
        new_cfg.aggressive = aggressive
    if wordlist is not None:
        new_cfg.wordlist.path = wordlist
    if seed is not None:
        new_cfg.seed.value = seed
    return new_cfg


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the mutilate command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_place: Optional[Path] = typer.Option(  # noqa: B008
        None, "--in-place", "-i", help="File to rewrite in place; stdin/stdout when omitted"
    ),
    wordlist: Optional[Path] = typer.Option(  # noqa: B008
        None, "--wordlist", "-w", help="Line-separated wordlist to draw replacements from"
    ),
    language: Optional[str] = typer.Option(  # noqa: B008
        None, "--language", "-l", help="ISO 639-1 language code, like 'de' (default: en)"
    ),
    aggressive: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--aggressive/--no-aggressive",
        "-a",
        help="Also replace string literals, which is more likely to change behavior",
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    encoding_out: str = typer.Option("utf-8", help="Output file encoding"),  # noqa: B008
    strict: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--strict/--no-strict",
        help="Refuse to write output that no longer parses",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Mutilate a document read from ``--in-place`` or standard input."""

    configure_logging(verbose)

    # Load configuration
    try:
        cfg = load_config(config_path)
    except Exception as exc:  # pragma: no cover - diverse
        _safe_exit(4, str(exc).splitlines()[0])
    cfg = _apply_overrides(
        cfg, language=language, aggressive=aggressive, wordlist=wordlist, seed=seed
    )
    strict_mode = cfg.verification.strict if strict is None else strict
    if verbose:
        typer.echo(f"Loaded config (language={cfg.language}, aggressive={cfg.aggressive})", err=True)

    # Read input
    try:
        text = read_document(in_place, encoding=encoding_in)
    except (IOFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(text)} chars", err=True)

    # Build the mutation context
    words: list[str] | None = None
    if cfg.wordlist.path is not None:
        try:
            words = read_wordlist(cfg.wordlist.path, encoding=cfg.wordlist.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            _safe_exit(4, f"Cannot read wordlist: {exc}")
    try:
        with Timing() as t_ctx:
            context = build_context(cfg, words=words, text=text)
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))
    if verbose:
        typer.echo(
            f"Indexed {len(context.index)} words for {context.language} in {t_ctx.ms:.1f} ms",
            err=True,
        )

    # Parse
    with Timing() as t_parse:
        tree, diagnostics = parse(text)
    if diagnostics:
        typer.echo(f"Syntax errors ({len(diagnostics)}):", err=True)
        for diagnostic in diagnostics:
            typer.echo(f"  {diagnostic}", err=True)
        _safe_exit(5, None)
    if verbose:
        typer.echo(f"Parsed in {t_parse.ms:.1f} ms", err=True)

    with Timing() as t_walk:
        output = mutilate_tree(tree, context)
    if verbose:
        typer.echo(f"Mutilated in {t_walk.ms:.1f} ms", err=True)

    report = scanner.scan_output(output)
    if not report.ok:
        typer.echo(f"Output has {report.problem_count} syntax errors:", err=True)
        for diagnostic in report.diagnostics:
            typer.echo(f"  {diagnostic}", err=True)
        if strict_mode:
            _safe_exit(6, None)

    # Write output
    try:
        write_document(in_place, output, encoding=encoding_out)
    except OSError as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo("Wrote output", err=True)
