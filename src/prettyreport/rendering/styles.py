# topmark:header:start
#
#   project      : PrettyReport
#   file         : styles.py
#   file_relpath : src/prettyreport/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styling roles and stylers.

Formatting code never calls a color library directly. It asks a `Styler` to decorate a
piece of text for a given `StyleRole`:

    - `ChalkStyler` applies the `yachalk` colorizer bound to each role.
    - `PlainStyler` returns text unchanged (useful for tests and non-terminal output).

Whether the terminal actually receives escape codes is decided by `yachalk`'s color
mode, which the caller controls.
"""

from __future__ import annotations

from typing import Protocol

from yachalk import chalk

from prettyreport.rendering.colored_enum import ColoredStrEnum


class StyleRole(ColoredStrEnum):
    """Semantic roles of the styled fragments in a report."""

    # Value format: (role name: str, color_renderer: ChalkBuilder)
    PATH_DIR = ("path-dir", chalk.gray)
    PATH_BASE = ("path-base", chalk.bold)
    LOCATION = ("location", chalk.cyan)
    POSITION = ("position", chalk.yellow)
    COLON = ("colon", chalk.gray)
    SOURCE_TAG = ("source-tag", chalk.magenta)
    RULE_TAG = ("rule-tag", chalk.magenta)
    ERROR = ("error", chalk.red)
    WARNING = ("warning", chalk.yellow)
    LINE_NUMBER = ("line-number", chalk.bg_white.black)


class Styler(Protocol):
    """Capability that decorates text for a styling role."""

    def style(self, text: str, role: StyleRole) -> str:
        """Return ``text`` decorated for ``role``."""
        ...


class ChalkStyler:
    """Styler backed by the `yachalk` colorizers attached to `StyleRole` members."""

    def style(self, text: str, role: StyleRole) -> str:
        """Apply the colorizer bound to ``role``."""
        # Empty fragments stay empty so no bare escape pairs end up in the output.
        if not text:
            return text
        return role.color(text)


class PlainStyler:
    """Styler that leaves text untouched."""

    def style(self, text: str, role: StyleRole) -> str:
        """Return ``text`` unchanged."""
        return text


DEFAULT_STYLER: Styler = ChalkStyler()
