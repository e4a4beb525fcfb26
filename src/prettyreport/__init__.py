# topmark:header:start
#
#   project      : PrettyReport
#   file         : __init__.py
#   file_relpath : src/prettyreport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyReport package.

PrettyReport renders per-file diagnostics (errors and warnings from a linter or
compiler) into a colorized, human-readable terminal report with source excerpts
and a summary line.

Example:
    ```python
    from prettyreport import report

    print(
        report(
            [
                {
                    "path": "a.js",
                    "content": "let x = 1\\n",
                    "messages": [{"message": "bad var", "warn": False}],
                }
            ]
        )
    )
    ```
"""

from __future__ import annotations

from prettyreport.config.options import ReportOptions
from prettyreport.diagnostic.errors import DiagnosticInputError
from prettyreport.diagnostic.model import File, Message, Point, Position, Severity
from prettyreport.rendering.block import RenderedBlock
from prettyreport.rendering.report import report, report_detailed
from prettyreport.rendering.styles import ChalkStyler, PlainStyler, StyleRole, Styler
from prettyreport.rendering.summary import pluralize

__all__ = [
    "ChalkStyler",
    "DiagnosticInputError",
    "File",
    "Message",
    "PlainStyler",
    "Point",
    "Position",
    "RenderedBlock",
    "ReportOptions",
    "Severity",
    "StyleRole",
    "Styler",
    "pluralize",
    "report",
    "report_detailed",
]
