"""
Request models for the calculator API.

These mirror the calculator form: the horizon is given either as a number of
years or as a target age reached from the current age.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from .projection import MAX_AGE, MAX_HORIZON_YEARS, ScenarioInput


class ProjectionRequest(BaseModel):
    """Inputs for a single projection."""

    initial_capital: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Starting capital"
    )
    annual_rate_percent: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Nominal annual rate (%)"
    )
    monthly_contribution: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Monthly contribution"
    )
    target_type: Literal["years", "age"] = Field(
        default="years", description="Whether the horizon is a duration or an age"
    )
    target_years: Optional[float] = Field(
        default=None,
        gt=0,
        le=MAX_HORIZON_YEARS,
        allow_inf_nan=False,
        description="Years to invest",
    )
    current_age: Optional[float] = Field(
        default=None, gt=0, le=MAX_AGE, allow_inf_nan=False, description="Current age"
    )
    target_age: Optional[float] = Field(
        default=None,
        gt=0,
        le=MAX_AGE,
        allow_inf_nan=False,
        description="Age to invest until",
    )
    inflation_rate_percent: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Annual inflation rate (%); omit to skip inflation adjustment",
    )
    currency: Optional[str] = Field(
        default=None, description="Display currency code; defaults to the app setting"
    )

    @model_validator(mode="after")
    def validate_target(self):
        if self.target_type == "years":
            if self.target_years is None:
                raise ValueError("target_years is required when target_type is 'years'")
        else:
            if self.current_age is None or self.target_age is None:
                raise ValueError(
                    "current_age and target_age are required when target_type is 'age'"
                )
            if self.target_age <= self.current_age:
                raise ValueError("Target age must be greater than current age")
        return self

    def to_scenario_input(self) -> ScenarioInput:
        """Resolve the horizon and build the validated scenario."""
        if self.target_type == "age":
            return ScenarioInput.from_ages(
                current_age=self.current_age,
                target_age=self.target_age,
                initial_capital=self.initial_capital,
                annual_rate_percent=self.annual_rate_percent,
                monthly_contribution=self.monthly_contribution,
                inflation_rate_percent=self.inflation_rate_percent,
            )

        return ScenarioInput(
            initial_capital=self.initial_capital,
            years=self.target_years,
            annual_rate_percent=self.annual_rate_percent,
            monthly_contribution=self.monthly_contribution,
            inflation_rate_percent=self.inflation_rate_percent,
            current_age=self.current_age,
        )


class ComparisonRequest(BaseModel):
    """Two scenarios to compare side by side."""

    scenario_a: ScenarioInput
    scenario_b: ScenarioInput
    currency: Optional[str] = Field(
        default=None, description="Display currency code; defaults to the app setting"
    )
