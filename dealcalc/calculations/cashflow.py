"""
Cash Flow Calculations

Rolls the loan figures up into the holding-period cash picture of a flip:
upfront cash, costs carried while holding, and everything owed at sale.
"""

from dataclasses import dataclass

from dealcalc.calculations.models import AcquisitionType, FinancingInput

AUCTIONEER_FEE_RATE = 0.05  # 5% of purchase price


@dataclass(frozen=True)
class CashFlowSummary:
    """Holding-period cash figures for a deal."""

    auctioneer_fee: float
    total_monthly_expenses: float
    total_mortgage_payments: float
    total_holding_costs: float
    total_cash_invested: float
    total_cost_at_sale: float


def calculate_auctioneer_fee(
    purchase_price: float, acquisition_type: AcquisitionType
) -> float:
    """
    Calculate the auctioneer commission.

    Only AUCTION carries the fee. AUCTION_NO_FEE and TRADITIONAL pay nothing.
    """
    if acquisition_type == AcquisitionType.AUCTION:
        return purchase_price * AUCTIONEER_FEE_RATE
    return 0.0


def calculate_loan_amount(inputs: FinancingInput) -> float:
    """Loan amount is the purchase price not covered by the down payment."""
    if not inputs.use_financing:
        return 0.0
    return max(0.0, inputs.purchase_price - inputs.down_payment)


def calculate_cash_invested(inputs: FinancingInput, auctioneer_fee: float) -> float:
    """
    Calculate the cash needed upfront.

    A cash purchase puts the whole price in upfront. A financed purchase only
    puts in the down payment plus closing costs; the rest is deferred through
    the loan.
    """
    if inputs.use_financing:
        return (
            inputs.down_payment
            + inputs.estimated_costs
            + inputs.closing_costs
            + inputs.property_debts
            + auctioneer_fee
        )
    return (
        inputs.purchase_price
        + inputs.estimated_costs
        + inputs.property_debts
        + auctioneer_fee
    )


def aggregate_cash_flows(
    inputs: FinancingInput, loan_amount: float, monthly_payment: float
) -> CashFlowSummary:
    """
    Aggregate upfront, holding and sale-time costs.

    At sale the full original loan amount is paid off; payments made during
    the holding period are not credited against the payoff balance.

    Args:
        inputs: Deal assumptions
        loan_amount: Financed principal (0 for cash purchases)
        monthly_payment: Mortgage payment carried during the holding period

    Returns:
        CashFlowSummary
    """
    months = inputs.estimated_time_months

    auctioneer_fee = calculate_auctioneer_fee(
        inputs.purchase_price, inputs.acquisition_type
    )

    total_monthly_expenses = inputs.monthly_expenses * months
    total_mortgage_payments = monthly_payment * months if inputs.use_financing else 0.0
    total_holding_costs = total_monthly_expenses + total_mortgage_payments

    total_cash_invested = calculate_cash_invested(inputs, auctioneer_fee)

    total_cost_at_sale = total_cash_invested + total_holding_costs
    if inputs.use_financing:
        total_cost_at_sale += loan_amount  # Pay off full loan

    return CashFlowSummary(
        auctioneer_fee=auctioneer_fee,
        total_monthly_expenses=total_monthly_expenses,
        total_mortgage_payments=total_mortgage_payments,
        total_holding_costs=total_holding_costs,
        total_cash_invested=total_cash_invested,
        total_cost_at_sale=total_cost_at_sale,
    )
