# topmark:header:start
#
#   project      : PrettyReport
#   file         : report.py
#   file_relpath : src/prettyreport/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report entry points.

`report` returns the formatted text; `report_detailed` returns the same text together
with the error and warning totals. Both share `render_report`.

Layout of a report:

    * one block per file that has at least one message, in input order: a header line
      with the file path (``<stdin>`` when the file has no path) followed by its
      messages in input order;
    * a blank line and the summary line, unless no file had any message, in which
      case the report is the empty string.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Final

from prettyreport.config.logging import get_logger
from prettyreport.config.options import resolve_options
from prettyreport.diagnostic.model import File, as_file
from prettyreport.rendering.block import merge_blocks
from prettyreport.rendering.message import render_message
from prettyreport.rendering.paths import format_path
from prettyreport.rendering.styles import DEFAULT_STYLER
from prettyreport.rendering.summary import summary_line

if TYPE_CHECKING:
    from prettyreport.config.logging import PrettyReportLogger
    from prettyreport.config.options import ReportOptions
    from prettyreport.rendering.block import RenderedBlock
    from prettyreport.rendering.styles import Styler

logger: PrettyReportLogger = get_logger(__name__)

STDIN_LABEL: Final[str] = "<stdin>"

FileLike = File | Mapping[str, Any]


def render_file(file: File, styler: Styler = DEFAULT_STYLER) -> RenderedBlock:
    """Render the header and all messages of ``file``.

    Callers filter out files without messages; this function does not.

    Args:
        file: File with at least one message.
        styler: Styler used for every styled fragment.

    Returns:
        RenderedBlock: Header plus merged messages, with the file's totals.
    """
    content_lines = file.lines()
    messages = merge_blocks(
        render_message(file, message, content_lines, styler) for message in file.messages
    )
    header = format_path(file.path or STDIN_LABEL, styler) + "\n"
    logger.trace(
        "Rendered %s: %d error(s), %d warning(s)",
        file.path or STDIN_LABEL,
        messages.errors_count,
        messages.warnings_count,
    )
    return messages.with_text(header + messages.text)


def render_report(
    files: Iterable[FileLike],
    options: ReportOptions | Mapping[str, Any] | None = None,
    *,
    styler: Styler | None = None,
) -> RenderedBlock:
    """Render every file with messages and append the summary line.

    Args:
        files: Files in reporting order, as `File` objects or input mappings.
        options: Report options. No key is currently recognized; all are ignored.
        styler: Styler to use; defaults to the `yachalk`-backed `ChalkStyler`.

    Returns:
        RenderedBlock: Full report text and totals.

    Raises:
        DiagnosticInputError: If a file or message mapping is malformed.
    """
    resolve_options(options)
    active: Styler = styler or DEFAULT_STYLER

    coerced = [as_file(f, where=f"files[{i}]") for i, f in enumerate(files)]
    with_messages = [f for f in coerced if f.messages]
    logger.debug(
        "Reporting %d of %d file(s) with messages", len(with_messages), len(coerced)
    )

    merged = merge_blocks(render_file(f, active) for f in with_messages)
    if not merged.text:
        return merged.with_text("")
    return merged.with_text(
        merged.text + "\n\n" + summary_line(merged.errors_count, merged.warnings_count, active)
    )


def report(
    files: Iterable[FileLike],
    options: ReportOptions | Mapping[str, Any] | None = None,
    *,
    styler: Styler | None = None,
) -> str:
    """Return the formatted report text for ``files``."""
    return render_report(files, options, styler=styler).text


def report_detailed(
    files: Iterable[FileLike],
    options: ReportOptions | Mapping[str, Any] | None = None,
    *,
    styler: Styler | None = None,
) -> RenderedBlock:
    """Return the formatted report text together with the error and warning totals."""
    return render_report(files, options, styler=styler)
