"""Column width computation over ragged rows."""

from __future__ import annotations

from collections.abc import Sequence


def measured_rows(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    footers: Sequence[str],
) -> list[Sequence[str]]:
    """Collect every row that takes part in width measurement.

    Headers and footers are included only when non-empty.
    """
    measured: list[Sequence[str]] = []
    if headers:
        measured.append(headers)
    measured.extend(rows)
    if footers:
        measured.append(footers)
    return measured


def column_count(rows: Sequence[Sequence[str]]) -> int:
    """Return the largest number of cells in any of ``rows``."""
    return max((len(row) for row in rows), default=0)


def column_widths(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    footers: Sequence[str],
    padding: int,
) -> list[int]:
    """
    Compute the rendered width of every column.

    A column's width is the longest cell found at that index in any
    measured row, plus ``padding`` on both sides. Rows shorter than the
    widest row simply do not contribute to the columns they lack.

    Args:
        headers: Header cells (may be empty)
        rows: Data rows, possibly of different lengths
        footers: Footer cells (may be empty)
        padding: Spaces placed left and right of each cell

    Returns:
        One width per column; empty when the table has no cells at all
    """
    measured = measured_rows(headers, rows, footers)
    count = column_count(measured)
    if count == 0:
        return []

    widths = [0] * count
    for row in measured:
        for i, cell in enumerate(row):
            width = len(cell) + 2 * padding
            if width > widths[i]:
                widths[i] = width
    return widths
