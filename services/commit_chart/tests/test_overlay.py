"""
Unit tests for glyph overlay layout.
"""

import pytest

from services.commit_chart.overlay import (
    GLYPH_ROTATION,
    compute_glyph_layout,
    plan_glyphs,
    text_origin,
)
from shared.models import BarGeometry, GlyphDrawCommand


@pytest.fixture
def geometry():
    """A 60x120 pixel bar centred on x=100 with its base at y=200."""
    return BarGeometry(x=100, y=80, base=200, width=60, height=120)


class TestComputeGlyphLayout:
    """Test cases for compute_glyph_layout."""

    @pytest.mark.parametrize("count,rows,cols,cells", [(1, 1, 1, 1), (4, 2, 2, 4), (5, 3, 2, 6)])
    def test_packing(self, geometry, count, rows, cols, cells):
        layout = compute_glyph_layout(geometry, count)
        assert (layout.rows, layout.cols, layout.cells) == (rows, cols, cells)

    def test_zero(self, geometry):
        layout = compute_glyph_layout(geometry, 0)
        assert layout.cells == 0


class TestPlanGlyphs:
    """Test cases for plan_glyphs."""

    def test_zero_count_draws_nothing(self, geometry):
        assert plan_glyphs(geometry, 0, "🐛") == []

    def test_zero_height_bar_draws_nothing_when_empty(self):
        flat = BarGeometry(x=10, y=50, base=50, width=20, height=0)
        assert plan_glyphs(flat, 0, "🐛") == []

    def test_missing_glyph_draws_nothing(self, geometry):
        assert plan_glyphs(geometry, 3, "") == []

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 7, 10, 16])
    def test_command_count_matches_value(self, geometry, count):
        """Test exactly one command per unit of the bar's value."""
        assert len(plan_glyphs(geometry, count, "✨")) == count

    def test_single_glyph_position(self, geometry):
        """Test one glyph fills the bar's bottom cell."""
        [command] = plan_glyphs(geometry, 1, "🐛")

        # glyph size = min(60 / 1, 120 / 1) = 60; cell origin (70, 80)
        assert command == GlyphDrawCommand(
            x=100, y=110, rotation=180.0, glyph="🐛", size=60, row=0, col=0
        )

    def test_row_major_from_base(self, geometry):
        """Test five glyphs in a 3x2 grid with the last cell blank."""
        commands = plan_glyphs(geometry, 5, "🔧")

        assert [(c.row, c.col) for c in commands] == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0)]
        # glyph_width = 30, glyph_height = 40, size = 30
        assert all(c.size == 30 for c in commands)
        assert [c.x for c in commands] == [85, 115, 85, 115, 85]
        assert [c.y for c in commands] == [175, 175, 135, 135, 95]

    def test_glyphs_stay_within_bar(self, geometry):
        for command in plan_glyphs(geometry, 7, "📝"):
            assert geometry.x - geometry.width / 2 <= command.x - command.size / 2
            assert command.x + command.size / 2 <= geometry.x + geometry.width / 2
            assert geometry.y <= command.y - command.size / 2
            assert command.y + command.size / 2 <= geometry.base

    def test_all_glyphs_rotated(self, geometry):
        assert {c.rotation for c in plan_glyphs(geometry, 4, "🧹")} == {GLYPH_ROTATION}
        assert GLYPH_ROTATION == 180.0

    def test_plan_is_pure(self, geometry):
        """Test repeated planning gives the same commands."""
        assert plan_glyphs(geometry, 6, "♻️") == plan_glyphs(geometry, 6, "♻️")


class TestTextOrigin:
    """Test cases for text_origin."""

    def test_half_turn_moves_origin_to_opposite_corner(self):
        command = GlyphDrawCommand(x=100, y=110, rotation=180.0, glyph="🐛", size=60)
        x, y = text_origin(command)
        assert x == pytest.approx(130)
        assert y == pytest.approx(140)

    def test_no_rotation(self):
        command = GlyphDrawCommand(x=100, y=110, rotation=0.0, glyph="🐛", size=60)
        assert text_origin(command) == pytest.approx((70, 80))
