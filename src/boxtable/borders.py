"""
Horizontal border lines between table sections.

Adjacent rows of a table may have different column counts. The separator
between them must show, at every column boundary, which of the two rows
actually has a vertical rule there:

    │ a │ b │ c │
    ├───┼───┴───┘
    │ d │

``select_joint`` isolates that decision so the line builders below only
concatenate glyphs and horizontal runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from . import glyphs


@dataclass(frozen=True)
class Joint:
    """Glyphs drawn around one column of a separator line.

    Attributes:
        left: Glyph at the column's left boundary
        right: Closing glyph at the column's right boundary; only set for
            the rightmost column of the line
    """

    left: str
    right: str = ""


def select_joint(prev_count: int, next_count: int, index: int) -> Joint:
    """
    Choose the separator glyphs for one column.

    The left glyph sits on the boundary before column ``index``. The upper
    row has a vertical rule there when ``index <= prev_count``, the lower
    row when ``index <= next_count``. The closing glyph of the last column
    follows the same rule for boundary ``index + 1``.

    Args:
        prev_count: Number of cells in the row above the separator
        next_count: Number of cells in the row below the separator
        index: Column index in ``[0, max(prev_count, next_count))``

    Returns:
        Joint for the column

    Raises:
        ValueError: If index lies outside the separator
    """
    last = max(prev_count, next_count) - 1
    if index < 0 or index > last:
        raise ValueError(
            f"Column index {index} outside separator of {last + 1} column(s)"
        )

    if index == 0:
        return Joint(glyphs.LEFT_TEE, glyphs.RIGHT_TEE if last == 0 else "")

    if index > prev_count:
        left = glyphs.TOP_TEE
    elif index > next_count:
        left = glyphs.BOTTOM_TEE
    else:
        left = glyphs.CROSS

    if index != last:
        return Joint(left)

    if index >= prev_count:
        right = glyphs.TOP_RIGHT
    elif index >= next_count:
        right = glyphs.BOTTOM_RIGHT
    else:
        right = glyphs.RIGHT_TEE
    return Joint(left, right)


def _edge_line(
    widths: Sequence[int],
    count: int,
    left: str,
    tee: str,
    right: str,
    horizontal: str,
) -> str:
    if count <= 0:
        return ""
    runs = [horizontal * widths[i] for i in range(count)]
    return left + tee.join(runs) + right + "\n"


def top_line(widths: Sequence[int], count: int) -> str:
    """Render the top border for a first section of ``count`` columns."""
    return _edge_line(
        widths, count, glyphs.TOP_LEFT, glyphs.TOP_TEE, glyphs.TOP_RIGHT, glyphs.HORIZONTAL
    )


def bottom_line(
    widths: Sequence[int],
    count: int,
    horizontal: str = glyphs.HORIZONTAL,
) -> str:
    """Render the bottom border for a last section of ``count`` columns."""
    return _edge_line(
        widths, count, glyphs.BOTTOM_LEFT, glyphs.BOTTOM_TEE, glyphs.BOTTOM_RIGHT, horizontal
    )


def separator_line(
    widths: Sequence[int],
    prev_count: int,
    next_count: int,
    horizontal: str = glyphs.HORIZONTAL,
) -> str:
    """
    Render the rule between two rows whose column counts may differ.

    Args:
        widths: Column widths computed over the whole table, so columns
            that neither neighbouring row reaches still have a width
        prev_count: Number of cells in the row above
        next_count: Number of cells in the row below
        horizontal: Glyph for the horizontal runs

    Returns:
        The line including its trailing newline, or ``""`` when both rows
        are empty
    """
    count = max(prev_count, next_count)
    if count <= 0:
        return ""

    parts: list[str] = []
    for i in range(count):
        joint = select_joint(prev_count, next_count, i)
        parts.append(joint.left)
        parts.append(horizontal * widths[i])
        parts.append(joint.right)
    return "".join(parts) + "\n"
