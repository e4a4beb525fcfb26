# topmark:header:start
#
#   project      : PrettyReport
#   file         : paths.py
#   file_relpath : src/prettyreport/rendering/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path and location formatting for file headers and message lines."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from prettyreport.rendering.styles import StyleRole

if TYPE_CHECKING:
    from prettyreport.diagnostic.model import Position
    from prettyreport.rendering.styles import Styler


def format_path(path: str, styler: Styler) -> str:
    """Render ``path`` with a muted directory part and an emphasized basename.

    The directory part keeps its trailing separator; the basename includes the extension.

    Args:
        path: File path to render.
        styler: Styler applying the ``path-dir`` and ``path-base`` roles.

    Returns:
        str: The styled path.
    """
    head, tail = os.path.split(path)
    directory = head + os.sep if head else ""
    return styler.style(directory, StyleRole.PATH_DIR) + styler.style(tail, StyleRole.PATH_BASE)


def format_location(path: str | None, position: Position | None, styler: Styler) -> str:
    """Render ``path:line:column`` for the start of a message line.

    Without a path the result is empty. The ``:line:column`` suffix is added only when
    both the start line and start column are truthy, so a start column of ``0`` counts
    as no position.

    Args:
        path: Path of the file owning the message, if any.
        position: Position of the message, if any.
        styler: Styler applying the ``location``, ``position`` and ``colon`` roles.

    Returns:
        str: The styled location, or an empty string.
    """
    if not path:
        return ""
    result = styler.style(path, StyleRole.LOCATION)
    if position is not None and position.start.line and position.start.column:
        colon = styler.style(":", StyleRole.COLON)
        result += (
            colon
            + styler.style(str(position.start.line), StyleRole.POSITION)
            + colon
            + styler.style(str(position.start.column), StyleRole.POSITION)
        )
    return result
