"""The mutable table model and its fluent API."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from .config import TableConfig
from .layout import column_widths
from .pipeline import CacheStats, RenderPipeline, normalize_rows

Row = list[str]


def _cells(values: Iterable[Any] | None) -> Row:
    """Convert ``values`` to a list of cell strings; ``None`` cells become ``""``."""
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return ["" if value is None else str(value) for value in values]


def _varargs(values: tuple[Any, ...]) -> Iterable[Any] | None:
    """
    Resolve the positional cells given to a single-row mutator.

    ``add_row("a", "b")`` and ``add_row(["a", "b"])`` are equivalent: a
    lone non-string iterable is taken as the cells themselves. A lone
    ``None`` clears, like assigning ``None`` to the property.
    """
    if len(values) == 1:
        (value,) = values
        if value is None:
            return None
        if isinstance(value, Iterable) and not isinstance(value, str):
            return value
    return values


class Table:
    """
    A table of an optional header, ragged data rows and an optional footer.

    Every mutator returns the table so calls can be chained, and every
    mutator ends by invalidating the memoized render.

    Example:
        table = (
            Table(padding=1)
            .set_headers("Name", "Age", "City")
            .add_row("Alice Cooper", "30", "New York")
            .add_rows(["Bob", "25"], ["Charlie Brown"])
        )
        print(table.render())

    The table is owned by a single caller. It does no locking: concurrent
    mutation or rendering from several threads must be serialized by the
    caller.

    Args:
        headers: Initial header cells
        rows: Initial data rows
        footers: Initial footer cells
        config: Rendering settings; defaults to ``TableConfig()``
        **settings: Individual ``TableConfig`` fields overriding ``config``

    Raises:
        InvalidPaddingError: If a negative padding is given
    """

    def __init__(
        self,
        headers: Iterable[Any] | None = None,
        rows: Iterable[Iterable[Any] | None] | None = None,
        footers: Iterable[Any] | None = None,
        config: TableConfig | None = None,
        **settings: Any,
    ) -> None:
        config = config or TableConfig()
        self._config = replace(config, **settings) if settings else config
        self._headers: Row = _cells(headers)
        self._rows: list[Row] = [_cells(row) for row in rows or []]
        self._footers: Row = _cells(footers)
        self._pipeline = RenderPipeline()

    def __repr__(self) -> str:
        return (
            f"Table(headers={self._headers!r}, rows={len(self._rows)}, "
            f"footers={self._footers!r}, config={self._config!r})"
        )

    def __str__(self) -> str:
        return self.render()

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    @property
    def headers(self) -> Row:
        """Header cells; empty when the table has no header."""
        return self._headers

    @headers.setter
    def headers(self, value: Iterable[Any] | None) -> None:
        self._headers = _cells(value)
        self.clear_cache()

    @property
    def rows(self) -> list[Row]:
        """Data rows in display order."""
        return self._rows

    @rows.setter
    def rows(self, value: Iterable[Iterable[Any] | None] | None) -> None:
        self._rows = [_cells(row) for row in value or []]
        self.clear_cache()

    @property
    def footers(self) -> Row:
        """Footer cells; empty when the table has no footer."""
        return self._footers

    @footers.setter
    def footers(self, value: Iterable[Any] | None) -> None:
        self._footers = _cells(value)
        self.clear_cache()

    def set_headers(self, *cells: Any) -> Table:
        """
        Replace the header cells, given individually or as one list.

        Call without arguments to remove the header.
        """
        self.headers = _varargs(cells)
        return self

    def set_footers(self, *cells: Any) -> Table:
        """
        Replace the footer cells, given individually or as one list.

        Call without arguments to remove the footer.
        """
        self.footers = _varargs(cells)
        return self

    def add_row(self, *cells: Any) -> Table:
        """
        Append one row.

        Cells may be passed individually or as one list. A row without
        cells renders as a single blank cell.
        """
        self._rows.append(_cells(_varargs(cells)))
        self.clear_cache()
        return self

    def add_rows(self, *rows: Iterable[Any] | None) -> Table:
        """Append several rows. ``add_rows(None)`` does nothing."""
        if _varargs(rows) is None:
            return self
        self._rows.extend(_cells(row) for row in rows)
        self.clear_cache()
        return self

    def clear_rows(self) -> Table:
        """Remove all data rows, keeping header and footer."""
        self._rows.clear()
        self.clear_cache()
        return self

    def clear(self) -> Table:
        """Remove header, rows and footer."""
        self._headers = []
        self._rows = []
        self._footers = []
        self.clear_cache()
        return self

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    @property
    def config(self) -> TableConfig:
        """Current rendering settings."""
        return self._config

    @config.setter
    def config(self, value: TableConfig) -> None:
        self._config = value
        self.clear_cache()

    def _update_config(self, **changes: Any) -> None:
        # replace() re-runs validation before anything is stored
        self._config = replace(self._config, **changes)
        self.clear_cache()

    @property
    def padding(self) -> int:
        """Spaces left and right of every cell's content. Default is 1."""
        return self._config.padding

    @padding.setter
    def padding(self, value: int) -> None:
        self._update_config(padding=value)

    @property
    def header_align_right(self) -> bool:
        """Whether header cells are right-aligned."""
        return self._config.header_align_right

    @header_align_right.setter
    def header_align_right(self, value: bool) -> None:
        self._update_config(header_align_right=value)

    @property
    def row_align_right(self) -> bool:
        """Whether data row cells are right-aligned."""
        return self._config.row_align_right

    @row_align_right.setter
    def row_align_right(self, value: bool) -> None:
        self._update_config(row_align_right=value)

    @property
    def footer_align_right(self) -> bool:
        """Whether footer cells are right-aligned."""
        return self._config.footer_align_right

    @footer_align_right.setter
    def footer_align_right(self, value: bool) -> None:
        self._update_config(footer_align_right=value)

    @property
    def caching_enabled(self) -> bool:
        """Whether the rendered text is memoized until the next mutation."""
        return self._config.caching_enabled

    @caching_enabled.setter
    def caching_enabled(self, value: bool) -> None:
        self._update_config(caching_enabled=value)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    @property
    def cache_stats(self) -> CacheStats:
        """Render cache hit/miss counters."""
        return self._pipeline.stats

    def clear_cache(self) -> Table:
        """Drop the memoized render without changing the table."""
        self._pipeline.invalidate()
        return self

    def column_widths(self) -> list[int]:
        """Rendered width of each column, padding included."""
        return column_widths(
            self._headers, normalize_rows(self._rows), self._footers, self._config.padding
        )

    def render(self) -> str:
        """Render the table as box-drawing text."""
        return self._pipeline.render(self._headers, self._rows, self._footers, self._config)
