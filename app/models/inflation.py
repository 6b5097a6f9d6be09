"""
Inflation adjustment helpers for the savings projection engine.

Nominal balances are converted to real (today's money) values by a simple
deflation with a constant annual inflation rate. Rates are expressed in
percent units (5 means 5% per year).
"""

import math
from typing import Literal

RealValueBasis = Literal["years", "months"]


def inflation_factor(inflation_rate_percent: float, years: float) -> float:
    """
    Cumulative price growth after a number of years.

    Args:
        inflation_rate_percent: Annual inflation rate in percent units
        years: Elapsed years (may be fractional)

    Returns:
        (1 + inflation_rate_percent / 100) ** years, or infinity when that
        exceeds the float range
    """
    try:
        return (1 + inflation_rate_percent / 100) ** years
    except OverflowError:
        return math.inf


def to_real_value(
    nominal_amount: float, inflation_rate_percent: float, years: float
) -> float:
    """Deflate a nominal amount observed `years` from now into today's money."""
    return nominal_amount / inflation_factor(inflation_rate_percent, years)


def terminal_deflation_years(
    years: float, total_months: int, basis: RealValueBasis = "years"
) -> float:
    """
    Exponent used to deflate the final balance of a projection.

    Args:
        years: Horizon exactly as entered (may be fractional)
        total_months: Whole months actually compounded
        basis: "years" deflates by the entered horizon, "months" by the
            compounded months expressed in years

    Returns:
        Number of years to deflate the final balance by
    """
    if basis == "years":
        return years
    if basis == "months":
        return total_months / 12
    raise ValueError(f"Unknown real value basis: {basis}")
