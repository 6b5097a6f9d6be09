"""
Calculator service for savings projections and scenario comparisons.

This service turns validated requests into engine calls and shapes the
results into the payload consumed by the front end: summary figures, the
yearly table, chart series and display strings.
"""

import logging
from typing import Any, Dict, List, Optional

from app.models.comparison import ComparisonResult, Winner, compare
from app.models.formatting import CurrencyFormatter, format_percentage
from app.models.inflation import RealValueBasis
from app.models.projection import ProjectionResult
from app.models.requests import ComparisonRequest, ProjectionRequest

logger = logging.getLogger(__name__)


class CalculatorService:
    """Service for running projections and comparisons."""

    def __init__(
        self, default_currency: str = "ARS", real_value_basis: RealValueBasis = "years"
    ) -> None:
        """Initialize the calculator service.

        Args:
            default_currency: Display currency when a request names none
            real_value_basis: Deflation basis for final real balances
        """
        self.default_currency = default_currency
        self.real_value_basis = real_value_basis
        self.logger = logging.getLogger(__name__)

    def build_projection(self, request: ProjectionRequest) -> Dict[str, Any]:
        """Project a single scenario.

        Args:
            request: Validated projection request

        Returns:
            Dictionary with summary, yearly table, chart data and display strings

        Raises:
            ValueError: If the requested currency is not supported
        """
        formatter = self._formatter(request.currency)
        scenario = request.to_scenario_input()

        result = scenario.project(real_value_basis=self.real_value_basis)
        self.logger.info(
            f"Projected {scenario.horizon_months} months "
            f"({result.horizon_years} full years) at {scenario.annual_rate_percent}%"
        )

        return {
            "currency": formatter.style.code,
            "summary": self._summary(result),
            "formatted_summary": self._formatted_summary(result, formatter),
            "yearly_table": self._yearly_rows(result),
            "breakdown_chart": self._breakdown(result),
            "growth_chart": self._growth_series(result, formatter),
        }

    def build_comparison(self, request: ComparisonRequest) -> Dict[str, Any]:
        """Compare two scenarios.

        Args:
            request: Validated comparison request

        Returns:
            Dictionary with both summaries, the winner and aligned chart data

        Raises:
            ValueError: If the requested currency is not supported
        """
        formatter = self._formatter(request.currency)

        comparison = compare(
            request.scenario_a,
            request.scenario_b,
            real_value_basis=self.real_value_basis,
        )
        self.logger.info(
            f"Compared scenarios: winner={comparison.winner.value} "
            f"difference={comparison.balance_difference:.2f}"
        )

        totals_a = [row.total_a for row in comparison.aligned_series]
        totals_b = [row.total_b for row in comparison.aligned_series]

        return {
            "currency": formatter.style.code,
            "scenario_a": self._summary(comparison.scenario_a),
            "scenario_b": self._summary(comparison.scenario_b),
            "formatted": {
                "scenario_a": self._formatted_summary(comparison.scenario_a, formatter),
                "scenario_b": self._formatted_summary(comparison.scenario_b, formatter),
                "winner": self._winner_text(comparison, formatter),
            },
            "winner": comparison.winner.value,
            "balance_difference": comparison.balance_difference,
            "margin": comparison.margin,
            "comparison_chart": {
                "years": [row.year_index for row in comparison.aligned_series],
                "scenario_a": totals_a,
                "scenario_b": totals_b,
                "labels_a": self._compact_labels(totals_a, formatter),
                "labels_b": self._compact_labels(totals_b, formatter),
            },
        }

    def _formatter(self, currency: Optional[str]) -> CurrencyFormatter:
        return CurrencyFormatter.for_currency(currency or self.default_currency)

    def _summary(self, result: ProjectionResult) -> Dict[str, Any]:
        return {
            "invested": result.final_invested,
            "interest": result.final_interest,
            "total": result.final_balance,
            "return_percent": result.return_percent,
            "real_total": result.final_real_balance,
            "months": result.total_months,
            "years": result.horizon_years,
        }

    def _formatted_summary(
        self, result: ProjectionResult, formatter: CurrencyFormatter
    ) -> Dict[str, str]:
        formatted = {
            "invested": formatter.format_currency(result.final_invested),
            "interest": formatter.format_currency(result.final_interest),
            "total": formatter.format_currency(result.final_balance),
            "return_percent": format_percentage(result.return_percent),
        }
        if result.inflation_adjusted:
            formatted["real_total"] = formatter.format_currency(result.final_real_balance)
        return formatted

    def _yearly_rows(self, result: ProjectionResult) -> List[Dict[str, Any]]:
        return [
            {
                "year": snapshot.year_index,
                "age": snapshot.age,
                "invested": snapshot.total_invested,
                "interest": snapshot.interest_earned,
                "total": snapshot.total_balance,
                "real": snapshot.real_balance,
            }
            for snapshot in result.yearly_series
        ]

    def _breakdown(self, result: ProjectionResult) -> Dict[str, Any]:
        """Invested capital versus interest earned, with shares of the total."""
        total = result.final_balance
        return {
            "invested": result.final_invested,
            "interest": result.final_interest,
            "invested_share": result.final_invested / total * 100 if total else None,
            "interest_share": result.final_interest / total * 100 if total else None,
        }

    def _growth_series(
        self, result: ProjectionResult, formatter: CurrencyFormatter
    ) -> Dict[str, Any]:
        arrays = result.to_arrays()
        totals = arrays["balance"].tolist()
        series: Dict[str, Any] = {
            "years": [int(year) for year in arrays["year"]],
            "total": totals,
            "total_labels": self._compact_labels(totals, formatter),
            "invested": arrays["invested"].tolist(),
        }
        if "real_balance" in arrays:
            series["real"] = arrays["real_balance"].tolist()
        return series

    def _compact_labels(
        self, values: List[Optional[float]], formatter: CurrencyFormatter
    ) -> List[Optional[str]]:
        """Axis labels for a chart series; gaps stay None."""
        return [
            None if value is None else formatter.format_compact(value)
            for value in values
        ]

    def _winner_text(
        self, comparison: ComparisonResult, formatter: CurrencyFormatter
    ) -> str:
        if comparison.winner is Winner.TIE:
            return "Technical tie"
        return (
            f"Scenario {comparison.winner.value} wins by "
            f"{formatter.format_currency(comparison.margin)}"
        )
