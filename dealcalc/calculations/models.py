"""
Value types for the deal calculation engine.

FinancingInput carries every assumption with its default already applied,
so the effective input can be inspected before anything is computed.
FinancingResult is the flat set of figures handed back to the host.
"""

import enum
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping

DEFAULT_LOCALE = "en-US"


class AcquisitionType(str, enum.Enum):
    """How the property is acquired."""

    TRADITIONAL = "TRADITIONAL"
    AUCTION = "AUCTION"  # Only type that carries the auctioneer fee
    AUCTION_NO_FEE = "AUCTION_NO_FEE"


class AmortizationType(str, enum.Enum):
    """Repayment policy shown to the user."""

    SAC = "SAC"  # Constant amortization
    PRICE = "PRICE"  # Constant payment (French)


# Host-facing names that do not follow plain camelCase
CAMEL_CASE_OVERRIDES = {
    "estimated_roi": "estimatedROI",
    "first_payment_sac": "firstPaymentSAC",
    "last_payment_sac": "lastPaymentSAC",
    "total_interest_sac": "totalInterestSAC",
    "monthly_payment_price": "monthlyPaymentPRICE",
    "total_interest_price": "totalInterestPRICE",
}


def _to_camel(name: str) -> str:
    if name in CAMEL_CASE_OVERRIDES:
        return CAMEL_CASE_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class FinancingInput:
    """Investment assumptions for a single deal evaluation."""

    purchase_price: float
    estimated_sale_price: float
    estimated_costs: float = 0.0  # Renovation / repairs
    monthly_expenses: float = 0.0  # HOA, taxes, insurance
    property_debts: float = 0.0  # Encumbrances assumed by the buyer
    estimated_time_months: int = 12  # Holding period
    acquisition_type: AcquisitionType = AcquisitionType.TRADITIONAL

    # Financing
    use_financing: bool = False
    down_payment: float = 0.0
    interest_rate: float = 0.0  # Annual rate in percent (e.g. 7.5)
    loan_term_years: int = 30
    closing_costs: float = 0.0  # ITBI, title fees, etc.
    amortization_type: AmortizationType = AmortizationType.SAC

    # Tax
    is_first_property: bool = False
    locale: str = DEFAULT_LOCALE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FinancingInput":
        """
        Build an input from a loosely-typed mapping.

        Accepts snake_case or camelCase keys. Missing keys and None values
        fall back to the field defaults; enum fields accept their string
        values.
        """
        values: Dict[str, Any] = {}
        for field in fields(cls):
            for key in (field.name, _to_camel(field.name)):
                if data.get(key) is not None:
                    values[field.name] = data[key]
                    break

        if "acquisition_type" in values:
            values["acquisition_type"] = AcquisitionType(values["acquisition_type"])
        if "amortization_type" in values:
            values["amortization_type"] = AmortizationType(values["amortization_type"])

        return cls(**values)


@dataclass(frozen=True)
class FinancingResult:
    """Calculated figures for a deal."""

    # Loan details
    loan_amount: float
    monthly_payment: float  # PRICE payment, the figure that gets persisted

    # Investment summary
    auctioneer_fee: float
    total_cash_invested: float  # What you need upfront
    total_holding_costs: float  # Costs during the holding period
    total_cost_at_sale: float  # Everything including loan payoff

    # Returns
    gross_proceeds: float
    capital_gains_tax: float
    estimated_profit: float
    estimated_roi: float  # Cash-on-cash, percent

    # Financing comparison
    first_payment_sac: float = 0.0
    last_payment_sac: float = 0.0
    total_interest_sac: float = 0.0
    monthly_payment_price: float = 0.0
    total_interest_price: float = 0.0
    interest_savings: float = 0.0

    def to_dict(self, camel_case: bool = False) -> Dict[str, float]:
        """Serialize the result, optionally with camelCase keys."""
        data = asdict(self)
        if not camel_case:
            return data
        return {_to_camel(key): value for key, value in data.items()}
