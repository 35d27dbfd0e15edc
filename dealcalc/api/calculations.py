"""
Financial calculation API endpoints.

These endpoints accept deal inputs and return calculated results.
Used by the deal form for real-time previews.
"""

import logging

from fastapi import APIRouter, Depends

from dealcalc.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    CapitalGainsTaxRequest,
    CapitalGainsTaxResponse,
    DealMetricsRequest,
    DealMetricsResponse,
    minimum_down_payment,
)
from dealcalc.calculations import amortization, taxes
from dealcalc.calculations.deal import compute_deal_metrics
from dealcalc.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/deal-metrics", response_model=DealMetricsResponse)
async def calculate_deal_metrics(
    inputs: DealMetricsRequest, settings: Settings = Depends(get_settings)
):
    """Calculate financing, holding costs, tax and ROI for a deal."""
    financing_input = inputs.to_financing_input(settings.default_locale)
    result = compute_deal_metrics(financing_input)

    logger.debug(
        "Deal metrics: financing=%s locale=%s roi=%s",
        financing_input.use_financing,
        financing_input.locale,
        result.estimated_roi,
    )

    return DealMetricsResponse(
        **result.to_dict(),
        locale=financing_input.locale,
        amortization_type=financing_input.amortization_type,
        interest_rate=financing_input.interest_rate,
        minimum_down_payment=minimum_down_payment(financing_input.purchase_price),
        tax_advisory=taxes.has_tax_advisory(
            financing_input.locale, financing_input.is_first_property
        ),
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def calculate_amortization(inputs: AmortizationRequest):
    """Generate a loan amortization schedule."""
    schedule = amortization.generate_amortization_schedule(
        principal=inputs.principal,
        annual_rate_pct=inputs.annual_rate,
        term_years=inputs.term_years,
        system=inputs.system,
        start_date=inputs.start_date,
    )

    logger.debug(
        "Amortization schedule: system=%s periods=%d", inputs.system.value, len(schedule)
    )

    return AmortizationResponse(
        system=inputs.system,
        schedule=schedule,
        total_interest=amortization.calculate_total_interest(schedule),
        total_paid=amortization.calculate_total_paid(schedule),
        first_payment=schedule[0]["payment"] if schedule else 0.0,
        last_payment=schedule[-1]["payment"] if schedule else 0.0,
    )


@router.post("/capital-gains-tax", response_model=CapitalGainsTaxResponse)
async def calculate_capital_gains_tax(
    inputs: CapitalGainsTaxRequest, settings: Settings = Depends(get_settings)
):
    """Calculate capital gains tax on a sale profit."""
    locale = inputs.locale or settings.default_locale
    tax = taxes.compute_capital_gains_tax(
        inputs.profit, locale, inputs.is_first_property
    )

    return CapitalGainsTaxResponse(
        locale=locale,
        capital_gains_tax=tax,
        net_profit=inputs.profit - tax,
        tax_advisory=taxes.has_tax_advisory(locale, inputs.is_first_property),
    )
