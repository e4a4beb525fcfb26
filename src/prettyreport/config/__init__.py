# topmark:header:start
#
#   project      : PrettyReport
#   file         : __init__.py
#   file_relpath : src/prettyreport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration primitives: logging setup and report options."""

from __future__ import annotations

from prettyreport.config.options import ReportOptions, resolve_options

__all__ = [
    "ReportOptions",
    "resolve_options",
]
