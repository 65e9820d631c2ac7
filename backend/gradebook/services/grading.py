"""
Score aggregation and grade derivation.

Everything here is pure: callers load score items, score rows and range tables
from storage and pass them in. Two grading strategies are supported and exactly
one is chosen per scope:

- fixed thresholds: a hard-coded cascade of inclusive percentage cutoffs
- range table: the scope's configured ``GradeRange`` rows
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

FIXED = "fixed"
RANGE_TABLE = "range_table"
POLICIES = (FIXED, RANGE_TABLE)

# Full label set a range table must provide, best first
GRADE_LABELS: tuple[str, ...] = ("A", "B+", "B", "C+", "C", "D+", "D", "F")
RANGE_FALLBACK_LABEL = "F"

DEFAULT_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (80, "4"),
    (70, "3"),
    (60, "2"),
    (50, "1"),
)
FIXED_FALLBACK_LABEL = "0"


def to_float(value: Any) -> float:
    if value is None:
        return 0.0
    return float(value)


class GradingStrategy(Protocol):
    name: str

    def grade(self, percent: float) -> str: ...


class FixedThresholdPolicy:
    """Cascade of inclusive lower bounds, evaluated from the highest down."""

    name = FIXED

    def __init__(
        self,
        thresholds: Iterable[tuple[float, str]] = DEFAULT_THRESHOLDS,
        fallback: str = FIXED_FALLBACK_LABEL,
    ) -> None:
        self.thresholds = sorted(thresholds, key=lambda t: t[0], reverse=True)
        self.fallback = fallback

    def grade(self, percent: float) -> str:
        for lower_bound, label in self.thresholds:
            if percent >= lower_bound:
                return label
        return self.fallback


class RangeTablePolicy:
    """
    Grades against a scope's range table.

    ``ranges`` may be ORM rows or plain mappings with ``grade_label`` and
    ``min_score``. The row with the greatest ``min_score <= percent`` wins; when
    none qualifies (or the scope has no table) the fallback label is returned.
    """

    name = RANGE_TABLE

    def __init__(self, ranges: Iterable[Any], fallback: str = RANGE_FALLBACK_LABEL) -> None:
        bounds = [(to_float(_field(r, "min_score")), _field(r, "grade_label")) for r in ranges]
        self.bounds = sorted(bounds, key=lambda b: b[0], reverse=True)
        self.fallback = fallback

    def grade(self, percent: float) -> str:
        for min_score, label in self.bounds:
            if min_score <= percent:
                return label
        return self.fallback


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row[name]
    return getattr(row, name)


@dataclass
class GradeSummary:
    scores: dict[int, float] = field(default_factory=dict)
    total: float = 0.0
    max: float = 0.0
    percent: float = 0.0
    grade: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "scores": self.scores,
            "total": self.total,
            "max": self.max,
            "percent": self.percent,
            "grade": self.grade,
        }


def compute_percent(total: float, maximum: float, decimals: int = 1) -> float:
    if maximum <= 0:
        return 0.0
    return round(total / maximum * 100, decimals)


def aggregate(
    items: Sequence[Any],
    scores: Iterable[Any],
    strategy: GradingStrategy,
    decimals: int = 1,
) -> GradeSummary:
    """
    Sum a student's recorded scores over the applicable items.

    Items never scored count as 0. Scores for items outside ``items`` are kept
    in ``scores`` for display but never contribute to ``total``.
    """
    recorded = {_field(s, "score_item_id"): to_float(_field(s, "score")) for s in scores}

    total = 0.0
    maximum = 0.0
    for item in items:
        total += recorded.get(_field(item, "id"), 0.0)
        maximum += to_float(_field(item, "max_score"))

    percent = compute_percent(total, maximum, decimals)
    return GradeSummary(
        scores=recorded,
        total=round(total, 2),
        max=round(maximum, 2),
        percent=percent,
        grade=strategy.grade(percent),
    )
