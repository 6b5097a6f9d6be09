"""
Compound growth projection engine.

Projects a savings account month by month: the balance compounds at the
monthly equivalent of a nominal annual rate and a fixed contribution is added
at the end of every month. One snapshot is recorded per completed year.

The engine is a pure function of its inputs. Validation belongs to
`ScenarioInput`; `project()` accepts whatever numbers it is given.
"""

import math
from typing import Dict, List, Optional

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .inflation import RealValueBasis, terminal_deflation_years, to_real_value

MONTHS_PER_YEAR = 12
MAX_HORIZON_YEARS = 200
MAX_AGE = 200


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def monthly_rate_from_annual(annual_rate_percent: float) -> float:
    """
    Monthly compounding rate equivalent to a nominal annual rate.

    Args:
        annual_rate_percent: Annual rate in percent units (12 means 12%)

    Returns:
        (1 + annual_rate_percent / 100) ** (1 / 12) - 1
    """
    return (1 + annual_rate_percent / 100) ** (1 / MONTHS_PER_YEAR) - 1


def months_in_horizon(years: float) -> int:
    """Whole months compounded for a horizon given in (possibly fractional) years."""
    return round_half_up(years * MONTHS_PER_YEAR)


class YearlySnapshot(BaseModel):
    """Account state at the end of a completed year."""

    model_config = ConfigDict(frozen=True)

    year_index: int = Field(..., ge=1, description="Completed year (1-based)")
    total_invested: float = Field(
        ..., description="Initial capital plus contributions to date"
    )
    total_balance: float = Field(..., description="Compounded balance")
    interest_earned: float = Field(..., description="Balance minus invested")
    real_balance: Optional[float] = Field(
        default=None, description="Balance in today's money, if inflation requested"
    )
    age: Optional[int] = Field(
        default=None, description="Saver's age at the end of the year, if known"
    )


class ProjectionResult(BaseModel):
    """Terminal values of a projection plus its yearly series."""

    model_config = ConfigDict(frozen=True)

    final_invested: float
    final_balance: float
    final_interest: float
    # None when nothing was invested: the return cannot be computed
    return_percent: Optional[float] = None
    final_real_balance: Optional[float] = None
    total_months: int
    yearly_series: List[YearlySnapshot] = Field(default_factory=list)

    @property
    def horizon_years(self) -> int:
        """Number of completed years in the projection."""
        return len(self.yearly_series)

    @property
    def return_computable(self) -> bool:
        return self.return_percent is not None

    @property
    def inflation_adjusted(self) -> bool:
        return self.final_real_balance is not None

    def balance_at(self, year_index: int) -> Optional[float]:
        """Balance at the end of a given year, or None past the horizon."""
        if 1 <= year_index <= len(self.yearly_series):
            return self.yearly_series[year_index - 1].total_balance
        return None

    def to_arrays(self) -> Dict[str, NDArray[np.float64]]:
        """
        Yearly series as numpy arrays, for chart and export consumers.

        Returns:
            Dictionary with "year", "invested", "interest" and "balance" arrays,
            plus "real_balance" when the projection is inflation adjusted
        """
        series = self.yearly_series
        arrays = {
            "year": np.array([s.year_index for s in series], dtype=np.float64),
            "invested": np.array([s.total_invested for s in series], dtype=np.float64),
            "interest": np.array([s.interest_earned for s in series], dtype=np.float64),
            "balance": np.array([s.total_balance for s in series], dtype=np.float64),
        }
        if self.inflation_adjusted:
            arrays["real_balance"] = np.array(
                [s.real_balance for s in series], dtype=np.float64
            )
        return arrays


def project(
    capital: float,
    years: float,
    annual_rate_percent: float,
    monthly_contribution: float,
    inflation_rate_percent: Optional[float] = None,
    current_age: Optional[float] = None,
    real_value_basis: RealValueBasis = "years",
) -> ProjectionResult:
    """
    Project account growth with monthly compounding and contributions.

    Each month interest accrues on the previous month's closing balance and
    then the contribution is added, so a contribution earns nothing in the
    month it is made.

    Args:
        capital: Initial capital
        years: Horizon in years; rounded once to whole months
        annual_rate_percent: Nominal annual rate in percent units
        monthly_contribution: Contribution added at the end of every month
        inflation_rate_percent: Annual inflation in percent units, or None to
            skip inflation adjustment
        current_age: Saver's current age, used to label yearly snapshots
        real_value_basis: How the final real balance is deflated. "years"
            uses the horizon as entered, "months" the compounded months.
            Yearly snapshots always deflate by their whole year index.

    Returns:
        ProjectionResult with one snapshot per completed year
    """
    monthly_rate = monthly_rate_from_annual(annual_rate_percent)
    total_months = months_in_horizon(years)

    balance = capital
    invested = capital
    snapshots: List[YearlySnapshot] = []

    for month in range(1, total_months + 1):
        balance = balance * (1 + monthly_rate) + monthly_contribution
        invested += monthly_contribution

        if month % MONTHS_PER_YEAR == 0:
            year_index = month // MONTHS_PER_YEAR
            snapshots.append(
                YearlySnapshot(
                    year_index=year_index,
                    total_invested=invested,
                    total_balance=balance,
                    interest_earned=balance - invested,
                    real_balance=(
                        to_real_value(balance, inflation_rate_percent, year_index)
                        if inflation_rate_percent is not None
                        else None
                    ),
                    age=(
                        round_half_up(current_age + year_index)
                        if current_age is not None
                        else None
                    ),
                )
            )

    final_interest = balance - invested
    return_percent = final_interest / invested * 100 if invested != 0 else None

    final_real_balance = None
    if inflation_rate_percent is not None:
        final_real_balance = to_real_value(
            balance,
            inflation_rate_percent,
            terminal_deflation_years(years, total_months, real_value_basis),
        )

    return ProjectionResult(
        final_invested=invested,
        final_balance=balance,
        final_interest=final_interest,
        return_percent=return_percent,
        final_real_balance=final_real_balance,
        total_months=total_months,
        yearly_series=snapshots,
    )


class ScenarioInput(BaseModel):
    """Validated inputs for one savings scenario."""

    model_config = ConfigDict(frozen=True)

    initial_capital: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Starting capital"
    )
    years: float = Field(
        ...,
        gt=0,
        le=MAX_HORIZON_YEARS,
        allow_inf_nan=False,
        description="Investment horizon in years",
    )
    annual_rate_percent: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Nominal annual rate (%)"
    )
    monthly_contribution: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Monthly contribution"
    )
    inflation_rate_percent: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Annual inflation rate (%); omit to skip inflation adjustment",
    )
    current_age: Optional[float] = Field(
        default=None,
        gt=0,
        le=MAX_AGE,
        allow_inf_nan=False,
        description="Saver's current age",
    )

    @model_validator(mode="after")
    def validate_horizon(self):
        if months_in_horizon(self.years) < 1:
            raise ValueError("Horizon must cover at least one month")
        return self

    @classmethod
    def from_ages(
        cls,
        current_age: float,
        target_age: float,
        initial_capital: float,
        annual_rate_percent: float,
        monthly_contribution: float = 0.0,
        inflation_rate_percent: Optional[float] = None,
    ) -> "ScenarioInput":
        """
        Build a scenario whose horizon runs from the current to a target age.

        Raises:
            ValueError: If the target age is not after the current age
        """
        if target_age <= current_age:
            raise ValueError("Target age must be greater than current age")

        return cls(
            initial_capital=initial_capital,
            years=target_age - current_age,
            annual_rate_percent=annual_rate_percent,
            monthly_contribution=monthly_contribution,
            inflation_rate_percent=inflation_rate_percent,
            current_age=current_age,
        )

    @property
    def horizon_months(self) -> int:
        return months_in_horizon(self.years)

    def project(self, real_value_basis: RealValueBasis = "years") -> ProjectionResult:
        """Run the projection engine on these inputs."""
        return project(
            capital=self.initial_capital,
            years=self.years,
            annual_rate_percent=self.annual_rate_percent,
            monthly_contribution=self.monthly_contribution,
            inflation_rate_percent=self.inflation_rate_percent,
            current_age=self.current_age,
            real_value_basis=real_value_basis,
        )
