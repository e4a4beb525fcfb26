# topmark:header:start
#
#   project      : PrettyReport
#   file         : __init__.py
#   file_relpath : src/prettyreport/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic input model.

This package provides the strongly-typed objects the reporter consumes. They are owned
by the caller and never mutated by rendering.

Design:
    - Files, messages and positions are immutable dataclasses.
    - A message without a position is valid; consumers branch on ``position is None``.
    - Plain mappings are coerced at the public entry points; malformed mappings raise
      `DiagnosticInputError`.
"""

from __future__ import annotations

from prettyreport.diagnostic.errors import DiagnosticInputError
from prettyreport.diagnostic.model import (
    File,
    Message,
    Point,
    Position,
    Severity,
    as_file,
    as_message,
)

__all__ = [
    "DiagnosticInputError",
    "File",
    "Message",
    "Point",
    "Position",
    "Severity",
    "as_file",
    "as_message",
]
