# topmark:header:start
#
#   project      : PrettyReport
#   file         : message.py
#   file_relpath : src/prettyreport/rendering/message.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of a single diagnostic message.

A message renders as one line, optionally followed by a blank line and an excerpt::

      ✖ src/a.js:1:4 - error eslint:no-var bad var

      1 let x = 1
           ~

This is the only place where severity turns into error/warning tallies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettyreport.diagnostic.model import Severity
from prettyreport.rendering.block import RenderedBlock
from prettyreport.rendering.excerpt import INDENT, render_excerpt
from prettyreport.rendering.paths import format_location
from prettyreport.rendering.styles import StyleRole

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prettyreport.diagnostic.model import File, Message
    from prettyreport.rendering.styles import Styler


def format_annotation(message: Message, styler: Styler) -> str:
    """Render ``source:rule`` (or whichever of the two is present, or nothing)."""
    source = styler.style(message.source, StyleRole.SOURCE_TAG) if message.source else ""
    rule = styler.style(message.rule_id, StyleRole.RULE_TAG) if message.rule_id else ""
    if source and rule:
        return source + styler.style(":", StyleRole.COLON) + rule
    return source + rule


def render_message(
    file: File, message: Message, content_lines: Sequence[str], styler: Styler
) -> RenderedBlock:
    """Render one message of ``file``.

    Args:
        file: File owning the message; supplies the path for the location prefix.
        message: The message to render.
        content_lines: ``file``'s content split into lines.
        styler: Styler used for every styled fragment.

    Returns:
        RenderedBlock: The message text, counting one error or one warning.
    """
    role = message.severity.role
    location = format_location(file.path, message.position, styler)
    annotation = format_annotation(message, styler)

    excerpt = None
    if message.position is not None:
        excerpt = render_excerpt(message.position, content_lines, styler)

    text = (
        INDENT
        + styler.style(message.severity.glyph, role)
        + " "
        + location
        + " - "
        + styler.style(message.severity.label, role)
        + " "
        + (annotation + " " if annotation else "")
        + message.message
        + ("\n\n" + excerpt if excerpt else "")
    )
    is_warning = message.severity is Severity.WARNING
    return RenderedBlock(
        text=text,
        errors_count=0 if is_warning else 1,
        warnings_count=1 if is_warning else 0,
    )
