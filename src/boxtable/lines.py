"""Rendering of a single row of cells into one bordered text line."""

from __future__ import annotations

from collections.abc import Sequence

from .glyphs import VERTICAL


def value_line(
    widths: Sequence[int],
    row: Sequence[str],
    padding: int,
    align_right: bool = False,
    boundary: str = VERTICAL,
) -> str:
    """
    Render one row's cells as a text line.

    Each cell is padded to its column's content width, wrapped in
    ``padding`` spaces, and every cell is bracketed by ``boundary``. A row
    shorter than the table ends at its own last cell.

    Example (padding=1):
        │ Alice │ 30 │

    Args:
        widths: Column widths from ``layout.column_widths``
        row: Cells to render
        padding: Spaces placed left and right of each cell
        align_right: Right-align cell content instead of left-align
        boundary: Glyph placed between and around cells

    Returns:
        The line including its trailing newline, or ``""`` for an empty row
    """
    if not row:
        return ""

    pad = " " * padding
    cells = []
    for i, cell in enumerate(row):
        content_width = widths[i] - 2 * padding
        text = cell.rjust(content_width) if align_right else cell.ljust(content_width)
        cells.append(f"{pad}{text}{pad}")

    return boundary + boundary.join(cells) + boundary + "\n"
