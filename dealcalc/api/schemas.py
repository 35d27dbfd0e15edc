"""
Request and response schemas for the calculation API.

Input validation lives here, at the boundary. The calculation package
assumes validated input and never raises on its own.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from dealcalc.calculations.locale_defaults import get_default_interest_rate
from dealcalc.calculations.models import (
    AcquisitionType,
    AmortizationType,
    FinancingInput,
)

MAX_PRICE = 999_999_999_999
MAX_MONTHLY_EXPENSES = 9_999_999
MIN_DOWN_PAYMENT_RATIO = 0.05  # At least 5% of purchase price


def minimum_down_payment(purchase_price: float) -> float:
    """Smallest down payment accepted for a financed purchase."""
    return purchase_price * MIN_DOWN_PAYMENT_RATIO


class CamelModel(BaseModel):
    """Accepts both snake_case and camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DealMetricsRequest(CamelModel):
    """Input for deal metrics calculation."""

    # Acquisition
    purchase_price: float = Field(gt=0, le=MAX_PRICE)
    estimated_costs: float = Field(default=0.0, ge=0)
    monthly_expenses: float = Field(default=0.0, ge=0, le=MAX_MONTHLY_EXPENSES)
    property_debts: float = Field(default=0.0, ge=0)
    acquisition_type: AcquisitionType = AcquisitionType.TRADITIONAL

    # Exit
    estimated_sale_price: float = Field(gt=0, le=MAX_PRICE)
    estimated_time_months: int = Field(default=12, ge=1, le=120)

    # Financing
    use_financing: bool = False
    down_payment: float = Field(default=0.0, ge=0)
    interest_rate: Optional[float] = Field(default=None, ge=0, le=50)
    loan_term_years: int = Field(default=30, ge=1, le=50)
    closing_costs: float = Field(default=0.0, ge=0)
    amortization_type: AmortizationType = AmortizationType.SAC

    # Tax
    is_first_property: bool = False
    locale: Optional[str] = None

    @model_validator(mode="after")
    def check_down_payment(self):
        """Down payment must be between 5% and 100% of the purchase price."""
        if not self.use_financing:
            return self
        if self.down_payment > self.purchase_price:
            raise ValueError("Down payment cannot exceed purchase price")
        if self.down_payment < minimum_down_payment(self.purchase_price):
            raise ValueError("Down payment should be at least 5% of purchase price")
        return self

    def to_financing_input(self, default_locale: str) -> FinancingInput:
        """Build the calculator input, filling locale-dependent defaults."""
        locale = self.locale or default_locale
        interest_rate = self.interest_rate
        if interest_rate is None:
            interest_rate = get_default_interest_rate(locale) if self.use_financing else 0.0

        return FinancingInput(
            purchase_price=self.purchase_price,
            estimated_sale_price=self.estimated_sale_price,
            estimated_costs=self.estimated_costs,
            monthly_expenses=self.monthly_expenses,
            property_debts=self.property_debts,
            estimated_time_months=self.estimated_time_months,
            acquisition_type=self.acquisition_type,
            use_financing=self.use_financing,
            down_payment=self.down_payment,
            interest_rate=interest_rate,
            loan_term_years=self.loan_term_years,
            closing_costs=self.closing_costs,
            amortization_type=self.amortization_type,
            is_first_property=self.is_first_property,
            locale=locale,
        )


class DealMetricsResponse(BaseModel):
    """Calculated deal metrics."""

    loan_amount: float
    monthly_payment: float
    auctioneer_fee: float
    total_cash_invested: float
    total_holding_costs: float
    total_cost_at_sale: float
    gross_proceeds: float
    capital_gains_tax: float
    estimated_profit: float
    estimated_roi: float

    # Financing comparison
    first_payment_sac: float
    last_payment_sac: float
    total_interest_sac: float
    monthly_payment_price: float
    total_interest_price: float
    interest_savings: float

    # Context for the host's display layer
    locale: str
    amortization_type: AmortizationType
    interest_rate: float
    minimum_down_payment: float
    tax_advisory: bool


class AmortizationRequest(CamelModel):
    """Input for amortization schedule generation."""

    principal: float = Field(gt=0, le=MAX_PRICE)
    annual_rate: float = Field(ge=0, le=50)  # Percent
    term_years: int = Field(default=30, ge=1, le=50)
    system: AmortizationType = AmortizationType.PRICE
    start_date: Optional[date] = None


class AmortizationResponse(BaseModel):
    """Amortization schedule with totals."""

    system: AmortizationType
    schedule: List[dict]
    total_interest: float
    total_paid: float
    first_payment: float
    last_payment: float


class CapitalGainsTaxRequest(CamelModel):
    """Input for a standalone capital gains tax calculation."""

    profit: float
    locale: Optional[str] = None
    is_first_property: bool = False


class CapitalGainsTaxResponse(BaseModel):
    """Capital gains tax result."""

    locale: str
    capital_gains_tax: float
    net_profit: float
    tax_advisory: bool


class LocaleDefaultsResponse(BaseModel):
    """Form defaults for a locale."""

    locale: str
    currency: str
    default_interest_rate: float
    loan_term_options: List[int]
    default_loan_term_years: int
