"""Render orchestration and memoization of the rendered table text.

``render_table`` is the pure rendering function. ``RenderPipeline`` wraps
it with a single-slot cache that the owning ``Table`` clears on every
mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from . import glyphs
from .borders import bottom_line, separator_line, top_line
from .config import TableConfig
from .layout import column_widths
from .lines import value_line

logger = logging.getLogger(__name__)

EMPTY_ROW_CELL = " "
"""Content given to zero-length rows so that no row renders invisible."""


def normalize_rows(rows: Sequence[Sequence[str]]) -> list[Sequence[str]]:
    """Return a copy of ``rows`` with every empty row replaced by one blank cell."""
    return [row if row else [EMPTY_ROW_CELL] for row in rows]


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    footers: Sequence[str],
    config: TableConfig,
) -> str:
    """
    Render headers, rows and footers as a box-drawing table.

    Example output (padding=1):
        ┌──────┬─────┐
        │ Name │ Age │
        ├══════┼═════┤
        │ John │ 30  │
        ├──────┼─────┘
        │ Jane │
        └──────┘

    Args:
        headers: Header cells (may be empty)
        rows: Data rows, possibly ragged
        footers: Footer cells (may be empty); drawn without borders
        config: Rendering settings

    Returns:
        The rendered table, one ``\\n``-terminated line per border or row,
        or ``""`` when the table has no cells
    """
    rows = normalize_rows(rows)
    if not headers and not rows and not footers:
        return ""

    padding = config.padding
    widths = column_widths(headers, rows, footers, padding)
    lines: list[str] = []

    if headers:
        lines.append(top_line(widths, len(headers)))
        lines.append(
            value_line(widths, headers, padding, config.header_align_right, glyphs.VERTICAL)
        )
        if rows:
            lines.append(
                separator_line(widths, len(headers), len(rows[0]), glyphs.HEADER_HORIZONTAL)
            )
        else:
            lines.append(bottom_line(widths, len(headers)))

    if rows:
        if not headers:
            lines.append(top_line(widths, len(rows[0])))

        for current, following in zip(rows, rows[1:]):
            lines.append(value_line(widths, current, padding, config.row_align_right))
            lines.append(separator_line(widths, len(current), len(following)))

        last = rows[-1]
        lines.append(value_line(widths, last, padding, config.row_align_right))
        lines.append(bottom_line(widths, len(last)))

    if footers:
        lines.append(
            value_line(widths, footers, padding, config.footer_align_right, glyphs.BLANK)
        )

    return "".join(lines)


@dataclass
class CacheStats:
    """Statistics for render cache monitoring."""

    hits: int = 0
    misses: int = 0

    def as_dict(self) -> dict[str, int]:
        """Return stats as a dictionary."""
        return {"hits": self.hits, "misses": self.misses}


class RenderPipeline:
    """
    Render a table and memoize the result.

    Holds exactly one cached string. The owner calls ``invalidate()`` after
    every change to the rendered state; the pipeline never inspects the
    state itself to detect staleness.

    Not thread-safe: concurrent renders or mutations must be serialized
    by the caller.
    """

    def __init__(self) -> None:
        self._cached: str | None = None
        self._stats = CacheStats()

    @property
    def stats(self) -> CacheStats:
        """Cache hit/miss counters."""
        return self._stats

    @property
    def is_cached(self) -> bool:
        """Whether a rendered result is currently stored."""
        return self._cached is not None

    def invalidate(self) -> None:
        """Drop the memoized result."""
        self._cached = None

    def render(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        footers: Sequence[str],
        config: TableConfig,
    ) -> str:
        """Return the rendered table, from cache when caching is enabled."""
        if config.caching_enabled and self._cached is not None:
            self._stats.hits += 1
            logger.debug("Render cache hit (%d chars)", len(self._cached))
            return self._cached

        self._stats.misses += 1
        result = render_table(headers, rows, footers, config)
        logger.debug(
            "Rendered table: %d header cells, %d rows, %d footer cells, %d chars",
            len(headers),
            len(rows),
            len(footers),
            len(result),
        )

        if config.caching_enabled:
            self._cached = result
        return result
