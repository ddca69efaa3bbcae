"""
Data models for CommitMoji.

This module provides:
- The closed, ordered set of commit categories with their glyphs and colours
- Category counts and the chart dataset derived from them
- Bar geometry, glyph layout and draw commands used by the chart overlay
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


class CommitCategory(Enum):
    """Commit categories, in classification and display order."""

    BUGS = ("bugs", "🐛", "rgba(255, 99, 132, 0.2)", "rgba(255, 99, 132, 1)")
    FEATURES = ("features", "✨", "rgba(54, 162, 235, 0.2)", "rgba(54, 162, 235, 1)")
    CHORES = ("chores", "🧹", "rgba(255, 206, 86, 0.2)", "rgba(255, 206, 86, 1)")
    FIXES = ("fixes", "🔧", "rgba(75, 192, 192, 0.2)", "rgba(75, 192, 192, 1)")
    DOCS = ("docs", "📝", "rgba(153, 102, 255, 0.2)", "rgba(153, 102, 255, 1)")
    REFACTOR = ("refactor", "♻️", "rgba(255, 159, 64, 0.2)", "rgba(255, 159, 64, 1)")

    def __init__(self, label: str, glyph: str, fill_color: str, border_color: str):
        self.label = label
        self.glyph = glyph
        self.fill_color = fill_color
        self.border_color = border_color

    @classmethod
    def labels(cls) -> List[str]:
        return [category.label for category in cls]

    @classmethod
    def from_label(cls, label: str) -> "CommitCategory":
        for category in cls:
            if category.label == label:
                return category
        raise ValueError(f"Unknown commit category: {label}")


def glyph_for_label(label: str) -> str:
    """Glyph drawn on the bar for ``label``; unknown labels get none."""
    try:
        return CommitCategory.from_label(label).glyph
    except ValueError:
        return ""


class CategoryCount(BaseModel):
    """Per-category commit counts, always keyed by the full category set."""

    counts: Dict[str, int] = Field(
        default_factory=lambda: {label: 0 for label in CommitCategory.labels()},
        description="Category label to number of commits",
    )

    @model_validator(mode="after")
    def validate_counts(self):
        expected = CommitCategory.labels()
        if list(self.counts) != expected:
            missing = {label: self.counts.get(label, 0) for label in expected}
            extra = set(self.counts) - set(expected)
            if extra:
                raise ValueError(f"Unknown categories: {sorted(extra)}")
            self.counts = missing
        if any(value < 0 for value in self.counts.values()):
            raise ValueError("Category counts cannot be negative")
        return self

    def increment(self, category: CommitCategory) -> None:
        self.counts[category.label] += 1

    def __getitem__(self, label: str) -> int:
        return self.counts[label]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def as_dict(self) -> Dict[str, int]:
        return dict(self.counts)


class ChartDataset(BaseModel):
    """Parallel, ordered bar chart series derived from a CategoryCount."""

    labels: List[str] = Field(default_factory=list)
    data: List[int] = Field(default_factory=list)
    background_color: List[str] = Field(default_factory=list)
    border_color: List[str] = Field(default_factory=list)
    label: str = Field(default="Number of Commits", description="Dataset legend label")
    border_width: int = Field(default=1, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_parallel(self):
        size = len(self.labels)
        if not (len(self.data) == len(self.background_color) == len(self.border_color) == size):
            raise ValueError("Chart series must all have the same length")
        return self

    @classmethod
    def empty(cls, label: str = "Number of Commits") -> "ChartDataset":
        """The initial state of the chart before any data arrives."""
        return cls(label=label)

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def bars(self) -> List[Tuple[str, int, str, str]]:
        return list(zip(self.labels, self.data, self.background_color, self.border_color))


class ChartOptions(BaseModel):
    """Fixed chart options; not exposed for external tuning."""

    begin_at_zero: bool = True
    responsive: bool = True
    maintain_aspect_ratio: bool = True
    glyph_overlay: bool = True

    model_config = {"frozen": True}


DEFAULT_CHART_OPTIONS = ChartOptions()


@dataclass(frozen=True)
class BarGeometry:
    """Pixel rectangle of a rendered bar, canvas coordinates (y grows downward).

    ``x`` is the horizontal centre, ``y`` the top edge and ``base`` the bottom
    edge of the bar.
    """

    x: float
    y: float
    base: float
    width: float
    height: float

    @classmethod
    def from_extent(cls, x0: float, y0: float, x1: float, y1: float, canvas_height: float) -> "BarGeometry":
        """Build from a display-space extent whose y axis grows upward."""
        top = canvas_height - max(y0, y1)
        base = canvas_height - min(y0, y1)
        return cls(
            x=(x0 + x1) / 2,
            y=top,
            base=base,
            width=abs(x1 - x0),
            height=base - top,
        )


@dataclass(frozen=True)
class GlyphLayout:
    """Near-square glyph grid packed into one bar."""

    geometry: BarGeometry
    count: int
    rows: int = field(init=False)
    cols: int = field(init=False)
    glyph_width: float = field(init=False)
    glyph_height: float = field(init=False)
    glyph_size: float = field(init=False)

    def __post_init__(self):
        if self.count < 0:
            raise ValueError("Glyph count cannot be negative")
        rows = math.ceil(math.sqrt(self.count)) if self.count else 0
        cols = math.ceil(self.count / rows) if rows else 0
        glyph_width = self.geometry.width / cols if cols else 0.0
        glyph_height = self.geometry.height / rows if rows else 0.0
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)
        object.__setattr__(self, "glyph_width", glyph_width)
        object.__setattr__(self, "glyph_height", glyph_height)
        object.__setattr__(self, "glyph_size", min(glyph_width, glyph_height))

    @property
    def cells(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class GlyphDrawCommand:
    """One glyph to draw: anchor point in canvas pixels, rotation in degrees."""

    x: float
    y: float
    rotation: float
    glyph: str
    size: float
    row: Optional[int] = None
    col: Optional[int] = None
