# topmark:header:start
#
#   project      : PrettyReport
#   file         : excerpt.py
#   file_relpath : src/prettyreport/rendering/excerpt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source excerpt rendering.

An excerpt is two lines: the offending source line behind a highlighted line-number
margin, and a row of ``~`` characters under the reported span::

      12 const value = compute(x)
         ~~~~~

Only the first line of a multi-line span is shown; its underline runs to the end of
that line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prettyreport.config.logging import get_logger
from prettyreport.rendering.styles import StyleRole

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prettyreport.config.logging import PrettyReportLogger
    from prettyreport.diagnostic.model import Position
    from prettyreport.rendering.styles import Styler

logger: PrettyReportLogger = get_logger(__name__)

INDENT: Final[str] = "  "
UNDERLINE_CHAR: Final[str] = "~"


def excerpt_line(position: Position, content_lines: Sequence[str]) -> str | None:
    """Return the source line a position starts on, or None if it is out of range."""
    index = position.start.line - 1
    if 0 <= index < len(content_lines):
        return content_lines[index]
    return None


def underline_length(position: Position, line_text: str) -> int:
    """Return the number of ``~`` characters to draw under the span, never negative."""
    if position.is_single_line:
        length = position.end.column - position.start.column
    else:
        length = len(line_text) - position.start.column
    return max(length, 0)


def render_excerpt(
    position: Position, content_lines: Sequence[str], styler: Styler
) -> str | None:
    """Render the two-line excerpt for ``position``.

    Args:
        position: Span of the message.
        content_lines: The file content split into lines.
        styler: Styler applying the ``line-number`` and ``error`` roles.

    Returns:
        str | None: The excerpt ending with a newline, or None when the start line does
        not exist in ``content_lines``.
    """
    text = excerpt_line(position, content_lines)
    if text is None:
        logger.trace(
            "No excerpt: line %d outside %d content line(s)",
            position.start.line,
            len(content_lines),
        )
        return None

    label = str(position.start.line)
    # Blank the digits so the underline row keeps the margin width.
    blank_label = " " * len(label)
    content_row = styler.style(label, StyleRole.LINE_NUMBER) + " " + text
    underline_row = (
        styler.style(blank_label, StyleRole.LINE_NUMBER)
        + " " * position.start.column
        + styler.style(UNDERLINE_CHAR * underline_length(position, text), StyleRole.ERROR)
    )
    return INDENT + content_row + "\n" + INDENT + underline_row + "\n"
