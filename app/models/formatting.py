"""
Display formatting for calculator results.

Currency only changes how amounts are shown; it never enters the projection.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CurrencyStyle(BaseModel):
    """How amounts in one currency are written."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=3, description="ISO 4217 code")
    symbol: str = Field(..., description="Currency symbol")
    thousands_separator: str = Field(default=",", description="Thousands separator")
    decimal_separator: str = Field(default=".", description="Decimal separator")
    symbol_position: Literal["prefix", "suffix"] = Field(default="prefix")
    symbol_spacing: bool = Field(
        default=False, description="Whether a space separates symbol and amount"
    )


CURRENCIES: Dict[str, CurrencyStyle] = {
    "USD": CurrencyStyle(code="USD", symbol="$"),
    "EUR": CurrencyStyle(
        code="EUR",
        symbol="€",
        thousands_separator=".",
        decimal_separator=",",
        symbol_position="suffix",
        symbol_spacing=True,
    ),
    "ARS": CurrencyStyle(
        code="ARS",
        symbol="$",
        thousands_separator=".",
        decimal_separator=",",
        symbol_spacing=True,
    ),
    "MXN": CurrencyStyle(code="MXN", symbol="$"),
    "CLP": CurrencyStyle(
        code="CLP", symbol="$", thousands_separator=".", decimal_separator=","
    ),
    "COP": CurrencyStyle(
        code="COP",
        symbol="$",
        thousands_separator=".",
        decimal_separator=",",
        symbol_spacing=True,
    ),
    "BRL": CurrencyStyle(
        code="BRL",
        symbol="R$",
        thousands_separator=".",
        decimal_separator=",",
        symbol_spacing=True,
    ),
}

MISSING_VALUE = "—"


def get_currency_style(code: str) -> CurrencyStyle:
    """Look up a supported currency by code (case-insensitive)."""
    try:
        return CURRENCIES[code.upper()]
    except KeyError:
        raise ValueError(
            f"Unsupported currency {code!r}; expected one of {sorted(CURRENCIES)}"
        ) from None


class CurrencyFormatter(BaseModel):
    """Formats currency and percentage values for display."""

    style: CurrencyStyle = Field(default_factory=lambda: CURRENCIES["USD"])
    decimal_places: int = Field(
        default=0, ge=0, le=10, description="Number of decimal places"
    )

    @classmethod
    def for_currency(cls, code: str, decimal_places: int = 0) -> "CurrencyFormatter":
        return cls(style=get_currency_style(code), decimal_places=decimal_places)

    def _rounded(self, amount: float) -> Decimal:
        """Round half away from zero to the configured decimal places."""
        value = Decimal(str(amount))
        if not value.is_finite():
            return value
        with localcontext() as ctx:
            # Large balances need more digits than the default context keeps
            ctx.prec = max(ctx.prec, value.adjusted() + self.decimal_places + 2)
            return value.quantize(
                Decimal(1).scaleb(-self.decimal_places), rounding=ROUND_HALF_UP
            )

    def _format_number(self, value: Decimal) -> str:
        formatted = f"{value.copy_abs():,.{self.decimal_places}f}"
        # Swap separators through a placeholder so "," and "." can trade places
        formatted = (
            formatted.replace(",", "\0")
            .replace(".", self.style.decimal_separator)
            .replace("\0", self.style.thousands_separator)
        )
        return formatted

    def format_currency(self, amount: Optional[float]) -> str:
        """
        Format a currency amount for display.

        Halves round away from zero, so 2.5 shows as 3 and -2.5 as -3.

        Args:
            amount: The amount to format, or None for a missing value

        Returns:
            Formatted currency string
        """
        if amount is None:
            return MISSING_VALUE

        value = self._rounded(amount)
        number = self._format_number(value)
        # A value that rounds to zero is shown without a minus sign
        sign = "-" if value < 0 else ""
        space = " " if self.style.symbol_spacing else ""

        if self.style.symbol_position == "suffix":
            return f"{sign}{number}{space}{self.style.symbol}"
        return f"{sign}{self.style.symbol}{space}{number}"

    def format_compact(self, amount: float) -> str:
        """Short label for chart axes: 1.5M, 250K, 3B."""
        for threshold, suffix in ((1e9, "B"), (1e6, "M"), (1e3, "K")):
            if abs(amount) >= threshold:
                return f"{self.format_currency(amount / threshold)}{suffix}"
        return self.format_currency(amount)


def format_percentage(value: Optional[float], decimal_places: int = 2) -> str:
    """
    Format a percentage for display.

    Args:
        value: The value in percent units (12.5 means 12.5%), or None when it
            could not be computed
        decimal_places: Number of decimal places to show

    Returns:
        Formatted percentage string
    """
    if value is None:
        return MISSING_VALUE
    return f"{value:.{decimal_places}f}%"
