# topmark:header:start
#
#   project      : PrettyReport
#   file         : model.py
#   file_relpath : src/prettyreport/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input types for the reporter: files, messages and source positions.

These objects are supplied by the caller (a linter, a compiler front end, ...) and are
read-only to the rendering layer. They can be constructed directly or coerced from
plain mappings shaped like::

    {
        "path": "src/a.js",
        "content": "let x = 1\\n",
        "messages": [
            {
                "message": "bad var",
                "warn": False,
                "source": "eslint",
                "ruleId": "no-var",
                "position": {
                    "start": {"line": 1, "column": 4},
                    "end": {"line": 1, "column": 5},
                },
            },
        ],
    }

Sections:
    * Severity: binary error/warning classification with its glyph and style role.
    * Point / Position: 1-based line, 0-based column span.
    * Message: one diagnostic with optional location and metadata.
    * File: a path, its full text, and its ordered messages.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from prettyreport.diagnostic.errors import DiagnosticInputError
from prettyreport.rendering.styles import StyleRole

ERROR_GLYPH: Final[str] = "\u2716"  # heavy multiplication x
WARNING_GLYPH: Final[str] = "\u26a0"  # warning sign


class Severity(Enum):
    """Severity of a diagnostic message.

    There are exactly two levels. Each message counts towards exactly one of the
    report's error or warning totals.
    """

    ERROR = "error"
    WARNING = "warning"

    @property
    def label(self) -> str:
        """Return the word printed after the location (``error`` / ``warning``)."""
        return self.value

    @property
    def glyph(self) -> str:
        """Return the symbol printed at the start of a message line."""
        return WARNING_GLYPH if self is Severity.WARNING else ERROR_GLYPH

    @property
    def role(self) -> StyleRole:
        """Return the styling role used for the glyph and the label."""
        return StyleRole.WARNING if self is Severity.WARNING else StyleRole.ERROR

    @classmethod
    def from_warn(cls, warn: bool) -> Severity:
        """Map the boolean ``warn`` flag of the input contract to a severity."""
        return cls.WARNING if warn else cls.ERROR


@dataclass(frozen=True)
class Point:
    """A location in a file: 1-based ``line``, 0-based ``column``."""

    line: int
    column: int


@dataclass(frozen=True)
class Position:
    """A span between two points. ``end`` may lie on a later line than ``start``."""

    start: Point
    end: Point

    @property
    def is_single_line(self) -> bool:
        """Return True if the span starts and ends on the same line."""
        return self.start.line == self.end.line


@dataclass(frozen=True)
class Message:
    """One reported issue.

    Attributes:
        message: Human-readable description.
        severity: Error or warning.
        source: Name of the producing tool or category, if any.
        rule_id: Identifier of the rule that fired, if any.
        position: Location of the issue, or None when it has no location.
    """

    message: str
    severity: Severity = Severity.ERROR
    source: str | None = None
    rule_id: str | None = None
    position: Position | None = None

    @property
    def warn(self) -> bool:
        """Return True for warning-severity messages."""
        return self.severity is Severity.WARNING

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, where: str = "message") -> Message:
        """Coerce a message mapping into a `Message`.

        Args:
            data: Mapping shaped like the message input contract.
            where: Field path used in error reports.

        Returns:
            Message: The coerced message.

        Raises:
            DiagnosticInputError: If ``message`` is missing or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise DiagnosticInputError(
                f"expected a mapping, got {type(data).__name__}", field=where
            )
        text = data.get("message")
        if not isinstance(text, str):
            raise DiagnosticInputError("missing or non-string 'message'", field=f"{where}.message")

        if "severity" in data:
            severity = _coerce_severity(data["severity"], where=f"{where}.severity")
        else:
            warn = data.get("warn", False)
            if not isinstance(warn, bool):
                raise DiagnosticInputError(
                    f"expected a boolean, got {warn!r}", field=f"{where}.warn"
                )
            severity = Severity.from_warn(warn)

        rule_id = data.get("ruleId", data.get("rule_id"))
        position_data = data.get("position")
        return cls(
            message=text,
            severity=severity,
            source=_optional_str(data.get("source"), where=f"{where}.source"),
            rule_id=_optional_str(rule_id, where=f"{where}.ruleId"),
            position=(
                None
                if position_data is None
                else _coerce_position(position_data, where=f"{where}.position")
            ),
        )


@dataclass(frozen=True)
class File:
    """A file as seen by the reporter.

    Attributes:
        content: Full text of the file.
        messages: Diagnostics attached to the file, in reporting order.
        path: File path; None or empty for anonymous input such as stdin.
    """

    content: str
    messages: tuple[Message, ...] = field(default_factory=tuple)
    path: str | None = None

    def lines(self) -> list[str]:
        """Split the content on ``"\\n"``; carriage returns are left in place."""
        return self.content.split("\n")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, where: str = "file") -> File:
        """Coerce a file mapping into a `File`.

        Args:
            data: Mapping with ``content``, ``messages`` and optional ``path``.
            where: Field path used in error reports.

        Returns:
            File: The coerced file.

        Raises:
            DiagnosticInputError: If ``content`` is missing or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise DiagnosticInputError(
                f"expected a mapping, got {type(data).__name__}", field=where
            )
        content = data.get("content")
        if not isinstance(content, str):
            raise DiagnosticInputError("missing or non-string 'content'", field=f"{where}.content")

        raw_messages = data.get("messages", ())
        if isinstance(raw_messages, (str, bytes)) or not isinstance(raw_messages, Sequence):
            raise DiagnosticInputError("'messages' must be a sequence", field=f"{where}.messages")

        return cls(
            content=content,
            messages=tuple(
                as_message(m, where=f"{where}.messages[{i}]") for i, m in enumerate(raw_messages)
            ),
            path=_optional_str(data.get("path"), where=f"{where}.path"),
        )


def as_message(value: Message | Mapping[str, Any], *, where: str = "message") -> Message:
    """Return ``value`` unchanged if it is a `Message`, else coerce it from a mapping."""
    if isinstance(value, Message):
        return value
    return Message.from_mapping(value, where=where)


def as_file(value: File | Mapping[str, Any], *, where: str = "file") -> File:
    """Return ``value`` unchanged if it is a `File`, else coerce it from a mapping."""
    if isinstance(value, File):
        return value
    return File.from_mapping(value, where=where)


# --- Coercion helpers ---------------------------------------------------------


def _optional_str(value: object, *, where: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise DiagnosticInputError(f"expected a string, got {type(value).__name__}", field=where)
    return value


def _coerce_int(value: object, *, where: str) -> int:
    # bool is an int subclass but never a valid line or column
    if isinstance(value, bool) or not isinstance(value, int):
        raise DiagnosticInputError(f"expected an integer, got {value!r}", field=where)
    return value


def _coerce_point(value: object, *, where: str) -> Point:
    if isinstance(value, Point):
        return value
    if not isinstance(value, Mapping):
        raise DiagnosticInputError("expected a mapping with 'line' and 'column'", field=where)
    return Point(
        line=_coerce_int(value.get("line"), where=f"{where}.line"),
        column=_coerce_int(value.get("column"), where=f"{where}.column"),
    )


def _coerce_position(value: object, *, where: str) -> Position:
    if isinstance(value, Position):
        return value
    if not isinstance(value, Mapping):
        raise DiagnosticInputError("expected a mapping with 'start' and 'end'", field=where)
    start = _coerce_point(value.get("start"), where=f"{where}.start")
    # A missing end collapses the span onto its start.
    end_data = value.get("end")
    end = start if end_data is None else _coerce_point(end_data, where=f"{where}.end")
    return Position(start=start, end=end)


def _coerce_severity(value: object, *, where: str) -> Severity:
    if isinstance(value, Severity):
        return value
    if isinstance(value, str):
        try:
            return Severity(value.strip().lower())
        except ValueError:
            pass
    raise DiagnosticInputError(
        f"expected 'error' or 'warning', got {value!r}", field=where
    )
