"""Box-drawing glyphs used to draw table borders."""

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
TOP_TEE = "┬"
BOTTOM_TEE = "┴"
LEFT_TEE = "├"
CROSS = "┼"
RIGHT_TEE = "┤"

HORIZONTAL = "─"
HEADER_HORIZONTAL = "═"
"""Horizontal rule drawn between the header and the first data row."""

VERTICAL = "│"
BLANK = " "
"""Cell boundary for footer lines, which have no vertical rules."""
