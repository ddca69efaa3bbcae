"""
Commit message classification and aggregation.

Messages are matched against an ordered list of marker rules. The first rule
with a marker contained in the message (case-sensitive) decides the category;
messages matching no rule are left out of the tally.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from shared.models import CategoryCount, ChartDataset, CommitCategory

logger = logging.getLogger(__name__)


# Evaluation order matters: earlier rules win.
CLASSIFICATION_RULES: List[Tuple[CommitCategory, Tuple[str, ...]]] = [
    (CommitCategory.BUGS, ("bug:", "🐛")),
    (CommitCategory.FEATURES, ("feat:", "✨")),
    (CommitCategory.CHORES, ("chore:",)),
    (CommitCategory.FIXES, ("fix:",)),
    (CommitCategory.DOCS, ("docs:",)),
    (CommitCategory.REFACTOR, ("refactor:",)),
]


def classify_message(message: str) -> Optional[CommitCategory]:
    """Return the category of ``message``, or None when no rule matches."""
    for category, markers in CLASSIFICATION_RULES:
        if any(marker in message for marker in markers):
            return category
    return None


def aggregate_counts(messages: Iterable[str]) -> CategoryCount:
    """Tally ``messages`` per category; every category is present, unmatched ones at 0."""
    counts = CategoryCount()
    for message in messages:
        category = classify_message(message)
        if category is not None:
            counts.increment(category)
    return counts


def build_chart_dataset(counts: CategoryCount, label: str = "Number of Commits") -> ChartDataset:
    """Derive the ordered bar series from ``counts``."""
    categories = list(CommitCategory)
    return ChartDataset(
        labels=[category.label for category in categories],
        data=[counts[category.label] for category in categories],
        background_color=[category.fill_color for category in categories],
        border_color=[category.border_color for category in categories],
        label=label,
    )


class ClassificationSummary(BaseModel):
    """Counts plus how many messages were classified at all."""

    counts: CategoryCount = Field(default_factory=CategoryCount)
    total_messages: int = Field(default=0, ge=0)
    classified: int = Field(default=0, ge=0)

    @property
    def unclassified(self) -> int:
        return self.total_messages - self.classified


def summarize_messages(messages: Iterable[str]) -> ClassificationSummary:
    """Aggregate ``messages`` and report classified/unclassified totals."""
    messages = list(messages)
    counts = aggregate_counts(messages)
    summary = ClassificationSummary(
        counts=counts,
        total_messages=len(messages),
        classified=counts.total,
    )
    logger.debug(
        f"Classified {summary.classified} of {summary.total_messages} commit messages"
    )
    return summary
