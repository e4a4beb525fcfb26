# topmark:header:start
#
#   project      : PrettyReport
#   file         : errors.py
#   file_relpath : src/prettyreport/diagnostic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while coercing caller input into diagnostic objects.

Rendering never raises: missing or malformed optional data degrades silently.
The only failure point is the boundary where plain mappings are turned into
`File` / `Message` instances and a required field is missing or mistyped.
"""

from __future__ import annotations


class DiagnosticInputError(ValueError):
    """A caller-supplied file or message mapping is structurally invalid.

    Attributes:
        field: Dotted name of the offending field (e.g. ``"messages[2].position.start.line"``).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        return f"{self.field}: {base}" if self.field else base
