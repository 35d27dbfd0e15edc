"""
Deal Metrics

Composes the amortization, cash flow and tax steps into the full set of
figures for a house-flip or auction deal:

- Short holding period (typically 3-18 months)
- Full loan payoff at sale
- ROI = profit / cash invested (cash-on-cash)

compute_deal_metrics is a pure function of its input.
"""

from dealcalc.calculations.amortization import compare_amortization
from dealcalc.calculations.cashflow import aggregate_cash_flows, calculate_loan_amount
from dealcalc.calculations.models import FinancingInput, FinancingResult
from dealcalc.calculations.taxes import calculate_returns


def compute_deal_metrics(inputs: FinancingInput) -> FinancingResult:
    """
    Calculate all financial metrics for a deal.

    The stored monthly payment is always the PRICE (fixed) payment; SAC
    figures are returned for comparison only.

    Args:
        inputs: Deal assumptions with defaults applied

    Returns:
        FinancingResult
    """
    loan_amount = calculate_loan_amount(inputs)

    comparison = compare_amortization(
        loan_amount, inputs.interest_rate, inputs.loan_term_years
    )
    monthly_payment = comparison.monthly_payment_price if inputs.use_financing else 0.0

    cash = aggregate_cash_flows(inputs, loan_amount, monthly_payment)

    returns = calculate_returns(
        estimated_sale_price=inputs.estimated_sale_price,
        total_cost_at_sale=cash.total_cost_at_sale,
        total_cash_invested=cash.total_cash_invested,
        locale=inputs.locale,
        is_first_property=inputs.is_first_property,
    )

    return FinancingResult(
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        auctioneer_fee=cash.auctioneer_fee,
        total_cash_invested=cash.total_cash_invested,
        total_holding_costs=cash.total_holding_costs,
        total_cost_at_sale=cash.total_cost_at_sale,
        gross_proceeds=returns.gross_proceeds,
        capital_gains_tax=returns.capital_gains_tax,
        estimated_profit=returns.estimated_profit,
        estimated_roi=returns.estimated_roi,
        first_payment_sac=comparison.sac.first_payment,
        last_payment_sac=comparison.sac.last_payment,
        total_interest_sac=comparison.sac.total_interest,
        monthly_payment_price=comparison.monthly_payment_price,
        total_interest_price=comparison.total_interest_price,
        interest_savings=comparison.interest_savings,
    )
