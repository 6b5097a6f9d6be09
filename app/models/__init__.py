"""Numeric core of the savings calculator."""

from .projection import (
    ProjectionResult,
    ScenarioInput,
    YearlySnapshot,
    monthly_rate_from_annual,
    months_in_horizon,
    project,
)
from .comparison import (
    TIE_THRESHOLD,
    AlignedYear,
    ComparisonResult,
    Winner,
    compare,
)

__all__ = [
    "ScenarioInput",
    "YearlySnapshot",
    "ProjectionResult",
    "project",
    "monthly_rate_from_annual",
    "months_in_horizon",
    "AlignedYear",
    "ComparisonResult",
    "Winner",
    "TIE_THRESHOLD",
    "compare",
]
