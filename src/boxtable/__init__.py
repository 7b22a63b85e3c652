"""
boxtable: render tables as text with box-drawing borders.

This library provides:
- Optional header, ragged data rows and an optional borderless footer
- Correct border joints between rows with different column counts
- Configurable padding and left/right alignment per section
- Memoized rendering, invalidated by every mutation

Example:
    from boxtable import Table

    table = (
        Table()
        .set_headers("Name", "Age", "City")
        .add_row("Alice Cooper", "30", "New York")
        .add_row("Bob", "25")
        .set_footers("2 people")
    )
    print(table)
"""

from .config import TableConfig
from .exceptions import (
    BoxTableError,
    ConfigurationError,
    InvalidPaddingError,
    ValidationError,
)
from .pipeline import CacheStats, render_table
from .table import Table

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "TableConfig",
    "CacheStats",
    # Functions
    "render_table",
    # Exceptions - Base
    "BoxTableError",
    # Exceptions - Categories
    "ConfigurationError",
    # Exceptions - Validation
    "ValidationError",
    "InvalidPaddingError",
]
