"""Unit tests for :mod:`utilkit.entrypoints.cli.helpers.messages`.

Glyph choice must follow the *current* stderr encoding reported by
``click.get_text_stream("stderr")``, and status lines must be styled and
written to stderr only.
"""

import io
import sys

import click
import pytest

from utilkit.entrypoints.cli.helpers.messages import (
    CAUTION,
    FAILURE,
    SUCCESS,
    _supports_character,
    error,
    glyph,
    success,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that claims to be a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        self._encoding = value

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", ["[!]", "[OK]", "[X]"]),
        ("utf-8", ["⚠️", "✅", "❌"]),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Emoji are used only when stderr can encode them."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert [glyph(CAUTION), glyph(SUCCESS), glyph(FAILURE)] == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is looked up on every call, not cached."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(
        click, "get_text_stream", lambda name: FakeTTY(next(encodings))
    )

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("encoding", "expected_glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(
    monkeypatch, encoding, expected_glyph, color_code, func
):
    """warn/success/error write bold, colored lines with the right glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("careful!")

    out = stream.getvalue()
    assert expected_glyph in out
    assert "careful!" in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


def test_success_writes_to_stderr_only(monkeypatch, capsys):
    """Status lines leave stdout untouched for command results."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    success("done")
    captured = capsys.readouterr()
    assert "done" in captured.err
    assert captured.out == ""
