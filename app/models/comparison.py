"""
Side-by-side comparison of two savings scenarios.

Each scenario is projected on its own; the results are aligned onto a common
year axis and the final balances decide a winner.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .inflation import RealValueBasis
from .projection import ProjectionResult, ScenarioInput

# Final balances closer than this (in currency units) count as a tie,
# whatever the currency.
TIE_THRESHOLD = 1.0


class Winner(str, Enum):
    """Outcome of a scenario comparison."""

    A = "A"
    B = "B"
    TIE = "tie"


class AlignedYear(BaseModel):
    """Balances of both scenarios at one year; None past a scenario's horizon."""

    model_config = ConfigDict(frozen=True)

    year_index: int = Field(..., ge=1)
    total_a: Optional[float] = None
    total_b: Optional[float] = None


class ComparisonResult(BaseModel):
    """Two projections with their difference and winner."""

    model_config = ConfigDict(frozen=True)

    scenario_a: ProjectionResult
    scenario_b: ProjectionResult
    balance_difference: float = Field(
        ..., description="Final balance of A minus final balance of B"
    )
    winner: Winner
    aligned_series: List[AlignedYear] = Field(default_factory=list)

    @property
    def margin(self) -> float:
        """Amount the winner is ahead by."""
        return abs(self.balance_difference)


def determine_winner(balance_difference: float) -> Winner:
    """
    Pick the winner from the difference of final balances (A minus B).

    Differences below TIE_THRESHOLD in absolute value are a tie.
    """
    if abs(balance_difference) < TIE_THRESHOLD:
        return Winner.TIE
    return Winner.A if balance_difference > 0 else Winner.B


def align_series(
    scenario_a: ProjectionResult, scenario_b: ProjectionResult
) -> List[AlignedYear]:
    """
    Put both yearly series on a shared axis of 1..max(horizon_a, horizon_b).

    Years past a scenario's own horizon are left as None, not zero.
    """
    max_years = max(scenario_a.horizon_years, scenario_b.horizon_years)
    return [
        AlignedYear(
            year_index=year,
            total_a=scenario_a.balance_at(year),
            total_b=scenario_b.balance_at(year),
        )
        for year in range(1, max_years + 1)
    ]


def compare(
    input_a: ScenarioInput,
    input_b: ScenarioInput,
    real_value_basis: RealValueBasis = "years",
) -> ComparisonResult:
    """
    Project two scenarios independently and compare their outcomes.

    Args:
        input_a: First scenario
        input_b: Second scenario
        real_value_basis: Passed through to each projection

    Returns:
        ComparisonResult with the aligned yearly balances and the winner
    """
    result_a = input_a.project(real_value_basis=real_value_basis)
    result_b = input_b.project(real_value_basis=real_value_basis)

    balance_difference = result_a.final_balance - result_b.final_balance

    return ComparisonResult(
        scenario_a=result_a,
        scenario_b=result_b,
        balance_difference=balance_difference,
        winner=determine_winner(balance_difference),
        aligned_series=align_series(result_a, result_b),
    )
