#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the boxtable API: headers, ragged rows, footers, padding
and alignment.

Run this example:
    uv run python examples/basic_table.py
"""

from boxtable import InvalidPaddingError, Table


def default_table() -> None:
    """Header, rows added one by one and in bulk."""
    print("=== Default table ===\n")

    table = Table().set_headers("Name", "Age", "City")
    table.add_row("Alice Cooper", "30", "New York")
    table.add_rows(
        ["Bob", "25", "Los Angeles"],
        ["Charlie Brown", "47", "Chicago"],
    )
    print(table)


def ragged_table() -> None:
    """Rows with fewer and more cells than the header."""
    print("=== Ragged rows ===\n")

    table = Table().set_headers("Name", "Date", "Number", "Id")
    table.add_row("name 1", "2024-01-01", "1")
    table.add_row("name 2", "2024-01-02")
    table.add_row("name 3")
    table.add_row("name 4", "2024-01-04", "4", "id-4", "extra")
    print(table)


def styled_table() -> None:
    """Wide padding, right-aligned rows and a footer."""
    print("=== Styling ===\n")

    table = Table(padding=3, row_align_right=True)
    table.set_headers("Item", "Qty")
    table.add_rows(["apples", 12], ["pears", 7])
    table.set_footers("total", 19)
    print(table)

    try:
        table.padding = -1
    except InvalidPaddingError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    default_table()
    ragged_table()
    styled_table()
