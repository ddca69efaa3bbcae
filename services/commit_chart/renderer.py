"""
Bar chart rendering for commit categories.

Chart components must be registered once by the hosting application, via
:func:`register_chart_components`, before any :class:`CommitChartRenderer` is
created.
"""

import io
import logging
import re
from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from config.settings import ChartSettings, settings
from services.commit_chart.fonts import GlyphFontResolver
from services.commit_chart.overlay import GlyphOverlay
from services.commit_classifier.classifier import aggregate_counts, build_chart_dataset
from shared.exceptions import FetchError
from shared.message_store import fetch_messages
from shared.models import DEFAULT_CHART_OPTIONS, ChartDataset, ChartOptions

logger = logging.getLogger(__name__)

_RGBA_PATTERN = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9.]+)\s*)?\)$"
)

_components_registered = False
_glyph_resolver: Optional[GlyphFontResolver] = None


def register_chart_components(font_family: Optional[str] = None) -> bool:
    """
    Select the Agg backend and configure fonts for chart rendering.

    Glyph fonts from the chart settings, plus any monochrome emoji fonts
    found on the system, are registered behind the label font.

    Safe to call more than once; returns True only on the call that
    performed the registration.
    """
    global _components_registered, _glyph_resolver
    if _components_registered:
        return False

    matplotlib.use("Agg")
    family = font_family or settings.chart.font_family
    _glyph_resolver = GlyphFontResolver(
        family,
        font_paths=settings.chart.glyph_font_paths,
        discover=settings.chart.discover_glyph_fonts,
    )
    matplotlib.rcParams["font.family"] = [family, *_glyph_resolver.family_names, "sans-serif"]
    _components_registered = True
    logger.debug(f"Chart components registered (font family: {family}, glyph fonts: {_glyph_resolver.family_names})")
    return True


def chart_components_registered() -> bool:
    return _components_registered


def get_glyph_resolver() -> GlyphFontResolver:
    if _glyph_resolver is None:
        raise RuntimeError("Chart components are not registered; call register_chart_components() at startup")
    return _glyph_resolver


def parse_rgba(color: str) -> Tuple[float, float, float, float]:
    """Convert an ``rgba(r, g, b, a)`` string to a matplotlib colour tuple."""
    match = _RGBA_PATTERN.match(color.strip())
    if not match:
        raise ValueError(f"Invalid rgba colour: {color}")
    red, green, blue, alpha = match.groups()
    return (
        int(red) / 255,
        int(green) / 255,
        int(blue) / 255,
        float(alpha) if alpha is not None else 1.0,
    )


class CommitChartRenderer:
    """Renders a ChartDataset as a bar chart with glyph overlays."""

    def __init__(self, chart_settings: Optional[ChartSettings] = None, options: ChartOptions = DEFAULT_CHART_OPTIONS):
        if not chart_components_registered():
            raise RuntimeError(
                "Chart components are not registered; call register_chart_components() at startup"
            )
        self.settings = chart_settings or settings.chart
        self.options = options

    async def load_dataset(self, source: Optional[str] = None, transport=None) -> ChartDataset:
        """
        Fetch the commit messages document and build the chart dataset.

        A failed fetch is logged and leaves the chart in its empty initial
        state.
        """
        source = source or self.settings.source
        try:
            messages = await fetch_messages(source, timeout=self.settings.fetch_timeout, transport=transport)
        except FetchError as e:
            logger.error(f"Failed to fetch commit messages: {e}")
            return ChartDataset.empty(label=self.settings.dataset_label)

        counts = aggregate_counts(messages)
        return build_chart_dataset(counts, label=self.settings.dataset_label)

    def render(self, dataset: ChartDataset) -> Figure:
        """Draw ``dataset`` on a new figure; the dataset is left untouched."""
        figure = Figure(
            figsize=(self.settings.figure_width, self.settings.figure_height),
            dpi=self.settings.dpi,
            layout="constrained" if self.options.responsive else None,
        )
        FigureCanvasAgg(figure)
        axes = figure.add_subplot()
        axes.set_title(self.settings.title)
        if self.options.maintain_aspect_ratio:
            axes.set_box_aspect(self.settings.figure_height / self.settings.figure_width)

        if dataset.is_empty:
            axes.set_xticks([])
            axes.set_yticks([])
            return figure

        bars = axes.bar(
            dataset.labels,
            dataset.data,
            color=[parse_rgba(color) for color in dataset.background_color],
            edgecolor=[parse_rgba(color) for color in dataset.border_color],
            linewidth=dataset.border_width,
            label=dataset.label,
        )
        if self.options.begin_at_zero:
            axes.set_ylim(bottom=0)
        axes.yaxis.set_major_locator(MaxNLocator(integer=True))
        axes.legend(loc="upper right")

        if self.options.glyph_overlay:
            axes.add_artist(
                GlyphOverlay(bars, dataset.labels, dataset.data, resolver=get_glyph_resolver())
            )
        return figure

    def render_png(self, dataset: ChartDataset) -> bytes:
        figure = self.render(dataset)
        buffer = io.BytesIO()
        figure.savefig(buffer, format="png")
        return buffer.getvalue()

    def save(self, dataset: ChartDataset, output_file: Union[str, Path, None] = None) -> Path:
        """Render ``dataset`` to a PNG file, replacing any previous chart."""
        path = Path(output_file or self.settings.output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.render_png(dataset))
        logger.info(f"Commit chart has been written to {path}")
        return path
