"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dealcalc.calculations.models import AcquisitionType, FinancingInput


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests that go through the HTTP app")


@pytest.fixture
def cash_deal():
    """Cash purchase flip: 200K in, 30K renovation, sold at 300K after 6 months."""
    return FinancingInput(
        purchase_price=200000,
        estimated_costs=30000,
        monthly_expenses=500,
        estimated_sale_price=300000,
        estimated_time_months=6,
        use_financing=False,
        property_debts=0,
        acquisition_type=AcquisitionType.TRADITIONAL,
        is_first_property=True,
    )


@pytest.fixture
def financed_deal():
    """Same flip financed with 40K down at 7.5% over 30 years."""
    return FinancingInput(
        purchase_price=200000,
        estimated_costs=30000,
        monthly_expenses=500,
        estimated_sale_price=300000,
        estimated_time_months=6,
        use_financing=True,
        down_payment=40000,
        interest_rate=7.5,
        loan_term_years=30,
        closing_costs=5000,
        is_first_property=True,
    )
