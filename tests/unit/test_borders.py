"""Tests for border line rendering and joint selection."""

import pytest

from boxtable.borders import Joint, bottom_line, select_joint, separator_line, top_line


def _joints(prev_count: int, next_count: int) -> list[Joint]:
    return [
        select_joint(prev_count, next_count, i) for i in range(max(prev_count, next_count))
    ]


class TestSelectJoint:
    """Tests for select_joint over small column count pairs."""

    def test_single_column_collapses_to_both_edges(self) -> None:
        """A one-column separator is a left tee and a right tee."""
        assert _joints(1, 1) == [Joint("├", "┤")]

    def test_equal_counts_use_crosses(self) -> None:
        """Columns present in both rows meet in crosses and end in a right tee."""
        assert _joints(2, 2) == [Joint("├"), Joint("┼", "┤")]

    def test_narrow_above_wide_below(self) -> None:
        """Columns only present below open downward."""
        assert _joints(1, 3) == [Joint("├"), Joint("┼"), Joint("┬", "┐")]

    def test_wide_above_narrow_below(self) -> None:
        """Columns only present above close upward."""
        assert _joints(3, 1) == [Joint("├"), Joint("┼"), Joint("┴", "┘")]

    def test_two_above_four_below(self) -> None:
        """The upper row's right edge is a cross, the extra columns open downward."""
        assert _joints(2, 4) == [Joint("├"), Joint("┼"), Joint("┼"), Joint("┬", "┐")]

    def test_four_above_two_below(self) -> None:
        """The lower row's right edge is a cross, the extra columns close upward."""
        assert _joints(4, 2) == [Joint("├"), Joint("┼"), Joint("┼"), Joint("┴", "┘")]

    def test_last_column_only_below(self) -> None:
        """A one-column difference keeps the cross and closes with a top-right corner."""
        assert _joints(2, 3)[-1] == Joint("┼", "┐")

    def test_last_column_only_above(self) -> None:
        """A one-column difference keeps the cross and closes with a bottom-right corner."""
        assert _joints(3, 2)[-1] == Joint("┼", "┘")

    def test_empty_separator_has_no_columns(self) -> None:
        """Two empty rows produce no joints."""
        assert _joints(0, 0) == []
        with pytest.raises(ValueError, match="outside separator"):
            select_joint(0, 0, 0)

    def test_index_out_of_range_raises(self) -> None:
        """Indexes beyond the wider row are rejected."""
        with pytest.raises(ValueError):
            select_joint(2, 3, 3)
        with pytest.raises(ValueError):
            select_joint(2, 3, -1)

    def test_only_last_column_has_closing_glyph(self) -> None:
        """Middle columns never carry a right glyph."""
        for prev_count, next_count in [(1, 3), (3, 1), (2, 4), (4, 2), (3, 3)]:
            joints = _joints(prev_count, next_count)
            assert all(joint.right == "" for joint in joints[:-1])
            assert joints[-1].right != ""


class TestSeparatorLine:
    """Tests for separator_line."""

    def test_equal_rows(self) -> None:
        """Separator between rows of the same length."""
        assert separator_line([3, 4], 2, 2) == "├───┼────┤\n"

    def test_ragged_rows_downward(self) -> None:
        """Separator from a one-cell row to a three-cell row."""
        assert separator_line([1, 2, 3], 1, 3) == "├─┼──┬───┐\n"

    def test_ragged_rows_upward(self) -> None:
        """Separator from a three-cell row to a one-cell row."""
        assert separator_line([1, 2, 3], 3, 1) == "├─┼──┴───┘\n"

    def test_header_horizontal(self) -> None:
        """The horizontal glyph can be replaced for the header divider."""
        assert separator_line([2, 2], 2, 2, "═") == "├══┼══┤\n"

    def test_uses_whole_table_widths(self) -> None:
        """Columns beyond both neighbours still use the table-wide widths."""
        assert separator_line([1, 1, 5], 2, 3) == "├─┼─┼─────┐\n"

    def test_empty(self) -> None:
        """Nothing is drawn between two empty rows."""
        assert separator_line([], 0, 0) == ""


class TestEdgeLines:
    """Tests for top_line and bottom_line."""

    def test_top_line(self) -> None:
        """Top border uses top corners and top tees."""
        assert top_line([3, 2, 1], 3) == "┌───┬──┬─┐\n"

    def test_top_line_single_column(self) -> None:
        """Single-column top border has corners only."""
        assert top_line([4], 1) == "┌────┐\n"

    def test_top_line_sized_to_first_section(self) -> None:
        """Top border only spans the first section's columns."""
        assert top_line([3, 2, 1], 1) == "┌───┐\n"

    def test_bottom_line(self) -> None:
        """Bottom border uses bottom corners and bottom tees."""
        assert bottom_line([3, 2], 2) == "└───┴──┘\n"

    def test_bottom_line_custom_horizontal(self) -> None:
        """Bottom border accepts another horizontal glyph."""
        assert bottom_line([2], 1, "═") == "└══┘\n"

    def test_zero_columns(self) -> None:
        """Edge lines for zero columns are empty."""
        assert top_line([], 0) == ""
        assert bottom_line([], 0) == ""
