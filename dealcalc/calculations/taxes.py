"""
Capital Gains Tax and Returns

Applies the locale's capital-gains regime to the gross profit and derives
net profit and cash-on-cash ROI.

Only pt-BR is modelled, as a progressive schedule on the gain. Every other
locale pays no modelled tax; US rules depend on holding period and filer
bracket, so callers show an advisory instead.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from dealcalc.calculations.rounding import round_half_up


class TaxBracket(NamedTuple):
    """One tier of a progressive schedule."""

    lower: float  # Exclusive lower bound of the tier
    upper: float  # Inclusive upper bound (inf for the top tier)
    rate: float
    base_tax: float  # Tax accumulated on all lower tiers


# Brazilian capital gains (ganho de capital) schedule.
# base_tax values are fixed constants, not derived from the rates.
BRAZIL_CAPITAL_GAINS_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(0.0, 5_000_000.0, 0.15, 0.0),
    TaxBracket(5_000_000.0, 10_000_000.0, 0.175, 750_000.0),
    TaxBracket(10_000_000.0, 30_000_000.0, 0.20, 750_000.0 + 875_000.0),
    TaxBracket(30_000_000.0, math.inf, 0.225, 750_000.0 + 875_000.0 + 4_000_000.0),
)

TAX_SCHEDULES = {
    "pt-BR": BRAZIL_CAPITAL_GAINS_BRACKETS,
}


@dataclass(frozen=True)
class ReturnsSummary:
    """Profit and return figures after tax."""

    gross_proceeds: float
    gross_profit: float
    capital_gains_tax: float
    estimated_profit: float
    estimated_roi: float


def _progressive_tax(profit: float, brackets: Tuple[TaxBracket, ...]) -> float:
    for bracket in brackets:
        if profit <= bracket.upper:
            return bracket.base_tax + (profit - bracket.lower) * bracket.rate
    return 0.0


def compute_capital_gains_tax(
    profit: float, locale: str, is_first_property: bool = False
) -> float:
    """
    Calculate capital gains tax on a sale.

    Args:
        profit: Gross profit on the sale
        locale: Locale code selecting the tax regime
        is_first_property: First-property sales are exempt

    Returns:
        Tax amount, 0.0 for exempt sales, losses and unmodelled locales
    """
    if is_first_property:
        return 0.0
    if not math.isfinite(profit) or profit <= 0:
        return 0.0

    brackets = TAX_SCHEDULES.get(locale)
    if brackets is None:
        return 0.0

    return _progressive_tax(profit, brackets)


def has_tax_advisory(locale: str, is_first_property: bool = False) -> bool:
    """True when the host should warn that capital gains tax is not included."""
    return not is_first_property and locale not in TAX_SCHEDULES


def calculate_roi(profit: float, cash_invested: float) -> float:
    """
    Calculate cash-on-cash ROI as a percentage rounded to 2 decimals.

    Returns 0.0 when no cash was invested.
    """
    if not cash_invested > 0:
        return 0.0
    return round_half_up((profit / cash_invested) * 100, 2)


def calculate_returns(
    estimated_sale_price: float,
    total_cost_at_sale: float,
    total_cash_invested: float,
    locale: str,
    is_first_property: bool = False,
) -> ReturnsSummary:
    """Calculate profit after tax and ROI on cash invested."""
    gross_proceeds = estimated_sale_price
    gross_profit = gross_proceeds - total_cost_at_sale

    capital_gains_tax = compute_capital_gains_tax(
        gross_profit, locale, is_first_property
    )
    estimated_profit = gross_profit - capital_gains_tax

    return ReturnsSummary(
        gross_proceeds=gross_proceeds,
        gross_profit=gross_profit,
        capital_gains_tax=capital_gains_tax,
        estimated_profit=estimated_profit,
        estimated_roi=calculate_roi(estimated_profit, total_cash_invested),
    )
