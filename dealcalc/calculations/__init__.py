"""
Deal Calculation Engine

Pure financing and profitability calculations for real estate flips.
No module in this package performs I/O or holds state between calls.
"""

from dealcalc.calculations import amortization, cashflow, taxes, locale_defaults
from dealcalc.calculations.deal import compute_deal_metrics
from dealcalc.calculations.models import (
    AcquisitionType,
    AmortizationType,
    FinancingInput,
    FinancingResult,
)

__all__ = [
    "amortization",
    "cashflow",
    "taxes",
    "locale_defaults",
    "compute_deal_metrics",
    "AcquisitionType",
    "AmortizationType",
    "FinancingInput",
    "FinancingResult",
]
