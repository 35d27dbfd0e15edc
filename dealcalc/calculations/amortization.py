"""
Loan Amortization Calculations

Monthly payment figures for the two repayment policies offered to the user:
PRICE (constant payment, French table) and SAC (constant amortization).
Rates are annual percentages (e.g. 7.5 for 7.5%) and terms are in years.

Degenerate inputs (non-positive principal, rate or term, or results that are
not finite) produce zeros instead of errors.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import List, Dict, Optional

import numpy as np
from dateutil.relativedelta import relativedelta

from dealcalc.calculations.models import AmortizationType
from dealcalc.calculations.rounding import round_currency


@dataclass(frozen=True)
class SACSummary:
    """Headline figures of a constant-amortization schedule."""

    first_payment: float = 0.0
    last_payment: float = 0.0
    total_interest: float = 0.0


@dataclass(frozen=True)
class AmortizationComparison:
    """SAC vs PRICE figures for the same principal, rate and term."""

    sac: SACSummary
    monthly_payment_price: float
    total_interest_price: float
    interest_savings: float


def _monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100 / 12


def _is_degenerate(principal: float, annual_rate_pct: float, term_years: int) -> bool:
    values = (principal, annual_rate_pct, term_years)
    if not all(math.isfinite(v) for v in values):
        return True
    return principal <= 0 or annual_rate_pct <= 0 or term_years <= 0


def compute_fixed_payment(
    principal: float, annual_rate_pct: float, term_years: int
) -> float:
    """
    Calculate the constant monthly payment (PRICE table).

    payment = P * r(1+r)^n / ((1+r)^n - 1)

    Args:
        principal: Loan principal amount
        annual_rate_pct: Nominal annual rate in percent
        term_years: Loan term in years

    Returns:
        Monthly payment rounded to cents, or 0.0 for degenerate input
    """
    return round_currency(_annuity_payment(principal, annual_rate_pct, term_years))


def _annuity_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Unrounded PRICE payment; 0.0 for degenerate input or overflow."""
    if _is_degenerate(principal, annual_rate_pct, term_years):
        return 0.0

    monthly_rate = _monthly_rate(annual_rate_pct)
    num_payments = int(term_years) * 12

    try:
        growth = (1 + monthly_rate) ** num_payments
        payment = principal * (monthly_rate * growth) / (growth - 1)
    except (OverflowError, ZeroDivisionError):
        return 0.0

    if not math.isfinite(payment):
        return 0.0

    return payment


def _sac_series(principal: float, annual_rate_pct: float, term_years: int):
    """Opening balances, interest and payments of every SAC period."""
    monthly_rate = _monthly_rate(annual_rate_pct)
    num_payments = int(term_years) * 12
    amortization = principal / num_payments

    with np.errstate(all="ignore"):
        balances = principal - np.arange(num_payments) * amortization
        interest = balances * monthly_rate
        payments = amortization + interest

    return balances, interest, payments, amortization


def compute_sac_schedule(
    principal: float, annual_rate_pct: float, term_years: int
) -> SACSummary:
    """
    Calculate first/last payment and total interest of a SAC schedule.

    The principal portion is constant (principal / n); interest is charged on
    the opening balance of each period, so payments fall over time.
    """
    if _is_degenerate(principal, annual_rate_pct, term_years):
        return SACSummary()

    _, interest, payments, _ = _sac_series(principal, annual_rate_pct, term_years)

    with np.errstate(all="ignore"):
        total_interest = float(interest.sum())
    first_payment = float(payments[0])
    last_payment = float(payments[-1])

    if not all(math.isfinite(v) for v in (first_payment, last_payment, total_interest)):
        return SACSummary()

    return SACSummary(
        first_payment=round_currency(first_payment),
        last_payment=round_currency(last_payment),
        total_interest=round_currency(total_interest),
    )


def compute_price_total_interest(
    principal: float, annual_rate_pct: float, term_years: int
) -> float:
    """
    Total interest paid over a PRICE schedule.

    Uses the exact annuity payment and rounds only the total, so the figure
    is never below the SAC total for the same loan.
    """
    payment = _annuity_payment(principal, annual_rate_pct, term_years)
    if payment == 0:
        return 0.0
    total_interest = payment * int(term_years) * 12 - principal
    if not math.isfinite(total_interest):
        return 0.0
    return max(0.0, round_currency(total_interest))


def compare_amortization(
    principal: float, annual_rate_pct: float, term_years: int
) -> AmortizationComparison:
    """
    Compare SAC and PRICE for the same loan.

    Both interest totals are rounded from exact figures, so for a positive
    rate the savings are never negative. The zero floor only matters for
    degenerate input.
    """
    sac = compute_sac_schedule(principal, annual_rate_pct, term_years)
    monthly_payment_price = compute_fixed_payment(principal, annual_rate_pct, term_years)
    total_interest_price = compute_price_total_interest(
        principal, annual_rate_pct, term_years
    )
    savings = round_currency(total_interest_price - sac.total_interest)

    return AmortizationComparison(
        sac=sac,
        monthly_payment_price=monthly_payment_price,
        total_interest_price=total_interest_price,
        interest_savings=max(0.0, savings),
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_years: int,
    system: AmortizationType = AmortizationType.PRICE,
    start_date: Optional[date] = None,
) -> List[Dict]:
    """
    Generate a full month-by-month amortization schedule.

    Args:
        principal: Loan principal amount
        annual_rate_pct: Nominal annual rate in percent
        term_years: Loan term in years
        system: PRICE (constant payment) or SAC (constant amortization)
        start_date: Date of first payment; rows carry no date when omitted

    Returns:
        List of amortization rows, empty for degenerate input
    """
    if _is_degenerate(principal, annual_rate_pct, term_years):
        return []

    monthly_rate = _monthly_rate(annual_rate_pct)
    num_payments = int(term_years) * 12

    if system == AmortizationType.SAC:
        balances, interest, payments, amortization = _sac_series(
            principal, annual_rate_pct, term_years
        )
        principal_parts = np.full(num_payments, amortization)
    else:
        payment = compute_fixed_payment(principal, annual_rate_pct, term_years)
        if payment == 0:
            return []
        balances = np.empty(num_payments)
        interest = np.empty(num_payments)
        principal_parts = np.empty(num_payments)
        balance = principal
        for i in range(num_payments):
            balances[i] = balance
            interest[i] = balance * monthly_rate
            principal_parts[i] = min(payment - interest[i], balance)
            balance -= principal_parts[i]
        # Last row absorbs the cent drift from the rounded payment
        principal_parts[-1] = balances[-1]
        payments = principal_parts + interest

    schedule = []
    for i in range(num_payments):
        ending_balance = balances[i] - principal_parts[i]
        row = {
            "period": i + 1,
            "beginning_balance": round_currency(float(balances[i])),
            "payment": round_currency(float(payments[i])),
            "interest": round_currency(float(interest[i])),
            "principal": round_currency(float(principal_parts[i])),
            "ending_balance": round_currency(max(0.0, float(ending_balance))),
        }
        if start_date is not None:
            row["date"] = (start_date + relativedelta(months=i)).isoformat()
        schedule.append(row)

    return schedule


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over the schedule."""
    return round_currency(sum(row["interest"] for row in schedule))


def calculate_total_paid(schedule: List[Dict]) -> float:
    """Calculate total of all payments (principal plus interest)."""
    return round_currency(sum(row["payment"] for row in schedule))
