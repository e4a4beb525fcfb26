# topmark:header:start
#
#   project      : PrettyReport
#   file         : __init__.py
#   file_relpath : src/prettyreport/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of diagnostic reports.

Public modules:
    - prettyreport.rendering.report
    - prettyreport.rendering.styles
    - prettyreport.rendering.block

Helper modules (paths, excerpt, message, summary) each render one fragment of a report.
"""

from __future__ import annotations
