# topmark:header:start
#
#   project      : PrettyReport
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input model: severity mapping, position helpers and mapping coercion."""

from __future__ import annotations

from typing import Any

import pytest

from prettyreport.diagnostic import (
    DiagnosticInputError,
    File,
    Message,
    Point,
    Position,
    Severity,
    as_file,
    as_message,
)
from prettyreport.diagnostic.model import ERROR_GLYPH, WARNING_GLYPH
from prettyreport.rendering.styles import StyleRole


def test_severity_from_warn() -> None:
    assert Severity.from_warn(True) is Severity.WARNING
    assert Severity.from_warn(False) is Severity.ERROR


def test_severity_label_and_glyph() -> None:
    assert (Severity.ERROR.label, Severity.ERROR.glyph) == ("error", ERROR_GLYPH)
    assert (Severity.WARNING.label, Severity.WARNING.glyph) == ("warning", WARNING_GLYPH)


def test_severity_role() -> None:
    assert Severity.ERROR.role is StyleRole.ERROR
    assert Severity.WARNING.role is StyleRole.WARNING


def test_message_warn_mirrors_severity() -> None:
    assert Message("m", Severity.WARNING).warn is True
    assert Message("m").warn is False


def test_position_single_line() -> None:
    assert Position(Point(2, 1), Point(2, 5)).is_single_line
    assert not Position(Point(2, 1), Point(3, 0)).is_single_line


def test_file_lines_split_on_newline_only() -> None:
    assert File(content="a\r\nb\n").lines() == ["a\r", "b", ""]
    assert File(content="").lines() == [""]


def test_message_from_full_mapping() -> None:
    message = Message.from_mapping(
        {
            "message": "bad var",
            "warn": True,
            "source": "eslint",
            "ruleId": "no-var",
            "position": {"start": {"line": 1, "column": 4}, "end": {"line": 2, "column": 0}},
        }
    )
    assert message == Message(
        message="bad var",
        severity=Severity.WARNING,
        source="eslint",
        rule_id="no-var",
        position=Position(Point(1, 4), Point(2, 0)),
    )


def test_message_from_minimal_mapping() -> None:
    message = Message.from_mapping({"message": "plain"})
    assert message == Message("plain")
    assert message.position is None


def test_snake_case_rule_id_is_accepted() -> None:
    assert Message.from_mapping({"message": "m", "rule_id": "r1"}).rule_id == "r1"


@pytest.mark.parametrize(
    ("raw", "expected"), [("warning", Severity.WARNING), ("ERROR", Severity.ERROR)]
)
def test_explicit_severity_string(raw: str, expected: Severity) -> None:
    assert Message.from_mapping({"message": "m", "severity": raw}).severity is expected


def test_missing_end_collapses_onto_start() -> None:
    message = Message.from_mapping(
        {"message": "m", "position": {"start": {"line": 3, "column": 2}}}
    )
    assert message.position == Position(Point(3, 2), Point(3, 2))


@pytest.mark.parametrize(
    ("data", "field"),
    [
        ({}, "message.message"),
        ({"message": 3}, "message.message"),
        ({"message": "m", "severity": "fatal"}, "message.severity"),
        ({"message": "m", "warn": "false"}, "message.warn"),
        ({"message": "m", "warn": 1}, "message.warn"),
        ({"message": "m", "warn": None}, "message.warn"),
        ({"message": "m", "source": 1}, "message.source"),
        ({"message": "m", "position": "1:2"}, "message.position"),
        (
            {"message": "m", "position": {"start": {"line": "1", "column": 0}}},
            "message.position.start.line",
        ),
        (
            {"message": "m", "position": {"start": {"line": 1, "column": True}}},
            "message.position.start.column",
        ),
        (
            {"message": "m", "position": {"start": {"line": 1, "column": 0}, "end": 5}},
            "message.position.end",
        ),
    ],
)
def test_malformed_message_mapping(data: dict[str, Any], field: str) -> None:
    with pytest.raises(DiagnosticInputError) as excinfo:
        Message.from_mapping(data)
    assert excinfo.value.field == field
    assert str(excinfo.value).startswith(f"{field}: ")


def test_file_from_mapping() -> None:
    file = File.from_mapping(
        {"path": "a.js", "content": "x\n", "messages": [{"message": "one"}, Message("two")]}
    )
    assert file.path == "a.js"
    assert [m.message for m in file.messages] == ["one", "two"]


@pytest.mark.parametrize(
    ("data", "field"),
    [
        ({"messages": []}, "file.content"),
        ({"content": "", "messages": "oops"}, "file.messages"),
        ({"content": "", "messages": [1]}, "file.messages[0]"),
        ({"content": "", "path": 7}, "file.path"),
    ],
)
def test_malformed_file_mapping(data: dict[str, Any], field: str) -> None:
    with pytest.raises(DiagnosticInputError) as excinfo:
        File.from_mapping(data)
    assert excinfo.value.field == field


def test_non_mapping_file_is_rejected() -> None:
    with pytest.raises(DiagnosticInputError):
        as_file("a.js")  # type: ignore[arg-type]


def test_as_helpers_pass_objects_through() -> None:
    file = File(content="")
    message = Message("m")
    assert as_file(file) is file
    assert as_message(message) is message


def test_input_error_is_value_error() -> None:
    assert issubclass(DiagnosticInputError, ValueError)
    assert str(DiagnosticInputError("boom")) == "boom"


def test_boolean_warn_is_accepted() -> None:
    assert Message.from_mapping({"message": "m", "warn": True}).severity is Severity.WARNING
    assert Message.from_mapping({"message": "m", "warn": False}).severity is Severity.ERROR
