from __future__ import annotations

import io
import logging
import sys

import pytest
from typer.testing import CliRunner

from mutilate.cli import app
from mutilate.utils.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("mutilate.replace").name == "mutilate.replace"
    assert get_logger("tests").name == "mutilate.tests"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(verbose=True)
    configure_logging(verbose=False)
    logger = logging.getLogger(ROOT_LOGGER)
    marked = [h for h in logger.handlers if getattr(h, "_mutilate_handler", False)]
    assert len(marked) == 1
    assert logger.level == logging.WARNING


def test_configure_logging_survives_closed_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    first = io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    configure_logging(verbose=True)
    first.close()

    second = io.StringIO()
    monkeypatch.setattr(sys, "stderr", second)
    configure_logging(verbose=True)
    get_logger("tests").debug("after reconfigure")
    assert "after reconfigure" in second.getvalue()
    configure_logging(verbose=False)


def test_repeated_cli_runs_in_one_process() -> None:
    runner = CliRunner()
    first = runner.invoke(app, ["run", "--seed", "1", "-v"], input="Hello")
    second = runner.invoke(app, ["run", "--seed", "1", "-v"], input="Hello")
    assert first.exit_code == 0
    assert second.exit_code == 0
    assert first.stdout == second.stdout
