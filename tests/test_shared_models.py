"""
Unit tests for shared models.

Covers the category set, category counts, the chart dataset and the glyph
layout arithmetic.
"""

import pytest

from shared.models import (
    BarGeometry,
    CategoryCount,
    ChartDataset,
    CommitCategory,
    DEFAULT_CHART_OPTIONS,
    GlyphLayout,
    glyph_for_label,
)


class TestCommitCategory:
    """Test cases for CommitCategory."""

    def test_category_order(self):
        """Test categories are declared in classification order."""
        assert CommitCategory.labels() == ["bugs", "features", "chores", "fixes", "docs", "refactor"]

    def test_category_attributes(self):
        """Test glyph and colours carried by a category."""
        assert CommitCategory.BUGS.glyph == "🐛"
        assert CommitCategory.FEATURES.glyph == "✨"
        assert CommitCategory.BUGS.fill_color == "rgba(255, 99, 132, 0.2)"
        assert CommitCategory.BUGS.border_color == "rgba(255, 99, 132, 1)"

    def test_every_category_has_distinct_colours(self):
        """Test no two categories share a fill colour."""
        fills = [category.fill_color for category in CommitCategory]
        assert len(set(fills)) == len(fills)

    def test_from_label(self):
        """Test lookup by label."""
        assert CommitCategory.from_label("docs") is CommitCategory.DOCS
        with pytest.raises(ValueError):
            CommitCategory.from_label("others")

    def test_glyph_for_label(self):
        """Test glyph lookup falls back to an empty string."""
        assert glyph_for_label("refactor") == "♻️"
        assert glyph_for_label("others") == ""


class TestCategoryCount:
    """Test cases for CategoryCount."""

    def test_defaults_cover_all_categories(self):
        """Test every category starts at zero."""
        counts = CategoryCount()
        assert counts.as_dict() == {
            "bugs": 0,
            "features": 0,
            "chores": 0,
            "fixes": 0,
            "docs": 0,
            "refactor": 0,
        }
        assert counts.total == 0

    def test_increment(self):
        """Test incrementing a single category."""
        counts = CategoryCount()
        counts.increment(CommitCategory.FIXES)
        counts.increment(CommitCategory.FIXES)

        assert counts["fixes"] == 2
        assert counts.total == 2

    def test_partial_counts_are_completed(self):
        """Test missing categories are filled in with zero, in order."""
        counts = CategoryCount(counts={"docs": 3, "bugs": 1})
        assert list(counts.as_dict()) == CommitCategory.labels()
        assert counts["docs"] == 3
        assert counts["features"] == 0

    def test_unknown_category_rejected(self):
        """Test an unknown key is a validation error."""
        with pytest.raises(ValueError):
            CategoryCount(counts={"others": 1})

    def test_negative_count_rejected(self):
        """Test counts cannot be negative."""
        with pytest.raises(ValueError):
            CategoryCount(counts={"bugs": -1})


class TestChartDataset:
    """Test cases for ChartDataset."""

    def test_empty_dataset(self):
        """Test the initial empty state."""
        dataset = ChartDataset.empty()
        assert dataset.is_empty
        assert dataset.bars() == []
        assert dataset.label == "Number of Commits"

    def test_series_must_be_parallel(self):
        """Test mismatched series lengths are rejected."""
        with pytest.raises(ValueError):
            ChartDataset(labels=["bugs"], data=[1, 2], background_color=["a"], border_color=["b"])

    def test_dataset_is_frozen(self):
        """Test the dataset cannot be reassigned."""
        dataset = ChartDataset.empty()
        with pytest.raises(Exception):
            dataset.label = "changed"

    def test_default_options(self):
        """Test the fixed chart options."""
        assert DEFAULT_CHART_OPTIONS.begin_at_zero is True
        assert DEFAULT_CHART_OPTIONS.responsive is True
        assert DEFAULT_CHART_OPTIONS.maintain_aspect_ratio is True
        assert DEFAULT_CHART_OPTIONS.glyph_overlay is True


class TestBarGeometry:
    """Test cases for BarGeometry."""

    def test_from_extent_flips_y_axis(self):
        """Test a display extent (y up) becomes canvas geometry (y down)."""
        geometry = BarGeometry.from_extent(100, 50, 140, 250, canvas_height=400)

        assert geometry.x == 120
        assert geometry.width == 40
        assert geometry.y == 150
        assert geometry.base == 350
        assert geometry.height == 200


class TestGlyphLayout:
    """Test cases for GlyphLayout."""

    @pytest.fixture
    def geometry(self):
        return BarGeometry(x=50, y=0, base=120, width=60, height=120)

    @pytest.mark.parametrize(
        "count,rows,cols",
        [(1, 1, 1), (2, 2, 1), (4, 2, 2), (5, 3, 2), (9, 3, 3), (10, 4, 3)],
    )
    def test_grid_dimensions(self, geometry, count, rows, cols):
        """Test near-square packing."""
        layout = GlyphLayout(geometry=geometry, count=count)
        assert (layout.rows, layout.cols) == (rows, cols)
        assert layout.cells >= count

    def test_zero_count(self, geometry):
        """Test an empty bar has no grid and no division by zero."""
        layout = GlyphLayout(geometry=geometry, count=0)
        assert layout.rows == 0
        assert layout.cols == 0
        assert layout.glyph_size == 0.0

    def test_glyph_size_is_smaller_side(self, geometry):
        """Test the glyph fits both axes."""
        layout = GlyphLayout(geometry=geometry, count=4)
        assert layout.glyph_width == 30
        assert layout.glyph_height == 60
        assert layout.glyph_size == 30

    def test_negative_count_rejected(self, geometry):
        """Test negative counts are invalid."""
        with pytest.raises(ValueError):
            GlyphLayout(geometry=geometry, count=-1)
