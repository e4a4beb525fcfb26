# topmark:header:start
#
#   project      : PrettyReport
#   file         : block.py
#   file_relpath : src/prettyreport/rendering/block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`RenderedBlock`, the unit every rendering step returns, and its merge fold.

Merging is associative: counts add up, texts are joined with a single newline.
Blocks with empty text are dropped without introducing a separator.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class RenderedBlock:
    """Rendered text plus the error and warning tallies it accounts for."""

    text: str = ""
    errors_count: int = 0
    warnings_count: int = 0

    @property
    def total(self) -> int:
        """Return the number of messages accounted for by this block."""
        return self.errors_count + self.warnings_count

    def merge(self, other: RenderedBlock) -> RenderedBlock:
        """Return this block followed by ``other``.

        The separator is a single newline, emitted only when both texts are non-empty.
        """
        if not other.text:
            text = self.text
        elif not self.text:
            text = other.text
        else:
            text = self.text + "\n" + other.text
        return RenderedBlock(
            text=text,
            errors_count=self.errors_count + other.errors_count,
            warnings_count=self.warnings_count + other.warnings_count,
        )

    def with_text(self, text: str) -> RenderedBlock:
        """Return a copy carrying ``text`` and the same counts."""
        return RenderedBlock(
            text=text, errors_count=self.errors_count, warnings_count=self.warnings_count
        )

    def to_dict(self) -> dict[str, str | int]:
        """Return the JSON-friendly ``{text, errorsCount, warningsCount}`` mapping."""
        return {
            "text": self.text,
            "errorsCount": self.errors_count,
            "warningsCount": self.warnings_count,
        }


EMPTY_BLOCK = RenderedBlock()


def merge_blocks(blocks: Iterable[RenderedBlock]) -> RenderedBlock:
    """Fold ``blocks`` left to right, starting from the empty block."""
    return reduce(RenderedBlock.merge, blocks, EMPTY_BLOCK)
