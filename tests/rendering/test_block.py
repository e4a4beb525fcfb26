# topmark:header:start
#
#   project      : PrettyReport
#   file         : test_block.py
#   file_relpath : tests/rendering/test_block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merge fold for `RenderedBlock`: separators, empty blocks and count additivity."""

from __future__ import annotations

from prettyreport.rendering.block import EMPTY_BLOCK, RenderedBlock, merge_blocks


def test_merge_joins_texts_with_single_newline() -> None:
    a = RenderedBlock("a", 1, 0)
    b = RenderedBlock("b", 0, 2)
    merged = merge_blocks([a, b])
    assert merged.text == "a\nb"
    assert (merged.errors_count, merged.warnings_count) == (1, 2)


def test_merge_of_nothing_is_empty_block() -> None:
    assert merge_blocks([]) == EMPTY_BLOCK
    assert merge_blocks([]).text == ""


def test_empty_text_blocks_add_no_separator() -> None:
    blocks = [RenderedBlock("", 1, 0), RenderedBlock("a", 0, 1), RenderedBlock("", 0, 1)]
    merged = merge_blocks(blocks)
    assert merged.text == "a"
    assert merged.errors_count == 1
    assert merged.warnings_count == 2


def test_merge_is_associative() -> None:
    a, b, c = RenderedBlock("a\n", 1, 0), RenderedBlock("b", 0, 1), RenderedBlock("c", 1, 1)
    assert a.merge(b).merge(c) == a.merge(b.merge(c)) == merge_blocks([a, b, c])


def test_trailing_newline_in_text_yields_blank_line() -> None:
    merged = merge_blocks([RenderedBlock("a\n"), RenderedBlock("b")])
    assert merged.text == "a\n\nb"


def test_to_dict_uses_external_key_names() -> None:
    block = RenderedBlock("x", 2, 3)
    assert block.to_dict() == {"text": "x", "errorsCount": 2, "warningsCount": 3}
    assert block.total == 5


def test_with_text_keeps_counts() -> None:
    block = RenderedBlock("x", 2, 3).with_text("y")
    assert block == RenderedBlock("y", 2, 3)
