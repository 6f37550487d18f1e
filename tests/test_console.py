"""Regression tests for the optional Rich console backend.

These tests verify that ``log`` keeps writing verbatim text to standard
output when Rich is missing, and that the loader reports the missing
dependency with a typed error.
"""

from __future__ import annotations

import sys

import pytest

from gentools.console import _load_rich_console_class, console, get_rich_console
from gentools.exceptions import EnvironmentError
from gentools.text import log


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_loader_raises_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        _load_rich_console_class()


def test_get_rich_console_raises_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError):
        get_rich_console()


def test_write_falls_back_to_stdout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    console.write("plain [red]text[/red]")
    assert capsys.readouterr().out == "plain [red]text[/red]"


def test_log_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    log("%s=%d", "answer", 42)
    assert capsys.readouterr().out == "answer=42\n"


def test_write_with_rich_is_verbatim(capsys: pytest.CaptureFixture[str]) -> None:
    pytest.importorskip("rich")

    console.write("a :smile: [b]c[/b] 12\n")
    assert capsys.readouterr().out == "a :smile: [b]c[/b] 12\n"
