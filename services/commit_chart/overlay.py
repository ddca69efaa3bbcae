"""
Glyph overlay for commit bars.

Each bar is filled with as many glyphs as its value, packed into a
near-square grid. The layout is a pure function of the bar geometry and the
count; :class:`GlyphOverlay` is the thin matplotlib adapter that recomputes it
from the bars' current pixel extents on every draw.
"""

import math
from typing import List, Sequence, Tuple

from matplotlib.artist import Artist
from matplotlib.font_manager import FontProperties
from matplotlib.text import Text
from matplotlib.transforms import IdentityTransform

from services.commit_chart.fonts import GlyphFontResolver
from shared.models import BarGeometry, GlyphDrawCommand, GlyphLayout, glyph_for_label

GLYPH_ROTATION = 180.0


def compute_glyph_layout(geometry: BarGeometry, count: int) -> GlyphLayout:
    """Grid of ``ceil(sqrt(count))`` rows by ``ceil(count / rows)`` columns."""
    return GlyphLayout(geometry=geometry, count=count)


def plan_glyphs(geometry: BarGeometry, count: int, glyph: str) -> List[GlyphDrawCommand]:
    """
    Draw commands for ``count`` glyphs packed into the bar.

    Cells are visited row-major starting at the base of the bar; cells past
    ``count`` stay blank. Each command is anchored at the cell origin offset
    by half a glyph and rotated 180 degrees. Coordinates are canvas pixels
    with y growing downward.
    """
    layout = compute_glyph_layout(geometry, count)
    if not layout.count or not glyph:
        return []

    half = layout.glyph_size / 2
    commands = []
    for row in range(layout.rows):
        for col in range(layout.cols):
            if row * layout.cols + col >= layout.count:
                continue
            cell_x = geometry.x - geometry.width / 2 + col * layout.glyph_width
            cell_y = geometry.base - layout.glyph_height - row * layout.glyph_height
            commands.append(
                GlyphDrawCommand(
                    x=cell_x + half,
                    y=cell_y + half,
                    rotation=GLYPH_ROTATION,
                    glyph=glyph,
                    size=layout.glyph_size,
                    row=row,
                    col=col,
                )
            )
    return commands


def text_origin(command: GlyphDrawCommand) -> Tuple[float, float]:
    """Canvas position of the glyph's baseline start once rotated about its anchor."""
    offset = -command.size / 2
    theta = math.radians(command.rotation)
    dx = offset * math.cos(theta) - offset * math.sin(theta)
    dy = offset * math.sin(theta) + offset * math.cos(theta)
    return command.x + dx, command.y + dy


class GlyphOverlay(Artist):
    """Draws the glyph grid over a sequence of bar patches."""

    def __init__(self, bars: Sequence, labels: Sequence[str], values: Sequence[int], resolver: GlyphFontResolver):
        super().__init__()
        self.bars = list(bars)
        self.labels = list(labels)
        self.values = list(values)
        self.resolver = resolver
        self.set_zorder(10)
        self.set_in_layout(False)

    def draw(self, renderer):
        if not self.get_visible():
            return
        _, canvas_height = renderer.get_canvas_width_height()
        pixels_per_point = renderer.points_to_pixels(1.0)

        for patch, label, value in zip(self.bars, self.labels, self.values):
            extent = patch.get_window_extent(renderer)
            geometry = BarGeometry.from_extent(extent.x0, extent.y0, extent.x1, extent.y1, canvas_height)
            resolved = self.resolver.resolve(glyph_for_label(label), fallback=label[:1].upper())
            for command in plan_glyphs(geometry, value, resolved.text):
                self.draw_command(renderer, command, canvas_height, pixels_per_point, resolved.font_path)
        self.stale = False

    def draw_command(
        self, renderer, command: GlyphDrawCommand, canvas_height: float, pixels_per_point: float, font_path: str
    ):
        x, y = text_origin(command)
        text = Text(
            x,
            canvas_height - y,
            command.glyph,
            rotation=command.rotation,
            rotation_mode="anchor",
            horizontalalignment="left",
            verticalalignment="baseline",
            fontproperties=FontProperties(fname=font_path, size=max(command.size / pixels_per_point, 0.1)),
        )
        text.set_transform(IdentityTransform())
        text.set_figure(self.figure)
        text.draw(renderer)
