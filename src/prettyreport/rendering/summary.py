# topmark:header:start
#
#   project      : PrettyReport
#   file         : summary.py
#   file_relpath : src/prettyreport/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Summary line: ``"<N> error(s) and <M> warning(s)"``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettyreport.rendering.styles import StyleRole

if TYPE_CHECKING:
    from prettyreport.rendering.styles import Styler


def pluralize(count: int, noun: str) -> str:
    """Return ``"1 noun"`` for a count of one and ``"N nouns"`` otherwise."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summary_line(errors_count: int, warnings_count: int, styler: Styler) -> str:
    """Render the totals line. Each phrase is colored only when its count is non-zero."""
    errors_text = pluralize(errors_count, "error")
    warnings_text = pluralize(warnings_count, "warning")
    if errors_count > 0:
        errors_text = styler.style(errors_text, StyleRole.ERROR)
    if warnings_count > 0:
        warnings_text = styler.style(warnings_text, StyleRole.WARNING)
    return f"{errors_text} and {warnings_text}"
