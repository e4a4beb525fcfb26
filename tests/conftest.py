# topmark:header:start
#
#   project      : PrettyReport
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PrettyReport test suite.

Sets TRACE logging for the whole run and provides small fixtures shared by the
rendering and API tests.

Notes:
    Exact-text assertions render with `PlainStyler`. Tests that exercise the default
    `ChalkStyler` compare output after stripping ANSI escape sequences, since whether
    `yachalk` emits escapes depends on the detected terminal.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import pytest

from prettyreport.config import logging
from prettyreport.diagnostic.model import File, Message, Point, Position, Severity
from prettyreport.rendering.styles import PlainStyler

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture(autouse=True)
def silence_prettyreport_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def plain() -> PlainStyler:
    """Return a styler that leaves text unchanged."""
    return PlainStyler()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper removing ANSI SGR sequences from rendered text."""

    def _strip(text: str) -> str:
        return _ANSI_RE.sub("", text)

    return _strip


def span(
    line: int, column: int, end_line: int | None = None, end_column: int | None = None
) -> Position:
    """Build a position; the end defaults to the start."""
    return Position(
        start=Point(line, column),
        end=Point(
            line if end_line is None else end_line,
            column if end_column is None else end_column,
        ),
    )


@pytest.fixture
def make_message() -> Callable[..., Message]:
    """Return a factory for messages with sensible defaults."""

    def _make(text: str = "boom", *, warn: bool = False, **kwargs: Any) -> Message:
        return Message(message=text, severity=Severity.from_warn(warn), **kwargs)

    return _make


@pytest.fixture
def make_file() -> Callable[..., File]:
    """Return a factory for files with sensible defaults."""

    def _make(*messages: Message, path: str | None = "a.js", content: str = "let x = 1\n") -> File:
        return File(content=content, messages=tuple(messages), path=path)

    return _make


@pytest.fixture
def make_span() -> Callable[..., Position]:
    """Return the `span` position builder as a fixture."""
    return span
