"""
Tests for calculation and locale API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from dealcalc.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def cash_payload():
    """Cash flip as sent by the deal form."""
    return {
        "purchasePrice": 200000,
        "estimatedCosts": 30000,
        "monthlyExpenses": 500,
        "estimatedSalePrice": 300000,
        "estimatedTimeMonths": 6,
        "useFinancing": False,
        "isFirstProperty": True,
    }


@pytest.fixture
def financed_payload(cash_payload):
    """Financed flip as sent by the deal form."""
    return {
        **cash_payload,
        "useFinancing": True,
        "downPayment": 40000,
        "interestRate": 7.5,
        "loanTermYears": 30,
        "closingCosts": 5000,
    }


# ============================================================================
# DEAL METRICS API TESTS
# ============================================================================

class TestDealMetricsAPI:
    """Test deal metrics endpoint."""

    def test_cash_deal(self, client, cash_payload):
        response = client.post("/api/calculate/deal-metrics", json=cash_payload)
        assert response.status_code == 200
        data = response.json()
        assert data["total_cash_invested"] == 230000
        assert data["total_holding_costs"] == 3000
        assert data["total_cost_at_sale"] == 233000
        assert data["estimated_profit"] == 67000
        assert data["estimated_roi"] == 29.13
        assert data["loan_amount"] == 0

    def test_financed_deal(self, client, financed_payload):
        response = client.post("/api/calculate/deal-metrics", json=financed_payload)
        assert response.status_code == 200
        data = response.json()
        assert data["loan_amount"] == 160000
        assert data["monthly_payment"] == 1118.74
        assert data["total_cash_invested"] == 75000
        assert data["estimated_roi"] == 73.72
        assert data["interest_savings"] == 62247.56
        assert data["minimum_down_payment"] == pytest.approx(10000)

    def test_snake_case_body(self, client):
        response = client.post(
            "/api/calculate/deal-metrics",
            json={"purchase_price": 100000, "estimated_sale_price": 120000},
        )
        assert response.status_code == 200
        assert response.json()["total_cash_invested"] == 100000

    def test_default_locale(self, client, cash_payload):
        response = client.post("/api/calculate/deal-metrics", json=cash_payload)
        data = response.json()
        assert data["locale"] == "en-US"
        assert data["amortization_type"] == "SAC"

    def test_tax_advisory_for_us(self, client, cash_payload):
        payload = {**cash_payload, "isFirstProperty": False, "locale": "en-US"}
        data = client.post("/api/calculate/deal-metrics", json=payload).json()
        assert data["capital_gains_tax"] == 0
        assert data["tax_advisory"] is True

    def test_brazil_tax(self, client, cash_payload):
        payload = {**cash_payload, "isFirstProperty": False, "locale": "pt-BR"}
        data = client.post("/api/calculate/deal-metrics", json=payload).json()
        assert data["capital_gains_tax"] == pytest.approx(10050)
        assert data["tax_advisory"] is False

    def test_missing_rate_uses_locale_default(self, client, financed_payload):
        payload = {**financed_payload, "locale": "pt-BR"}
        del payload["interestRate"]
        data = client.post("/api/calculate/deal-metrics", json=payload).json()
        assert data["interest_rate"] == 11.5
        assert data["monthly_payment"] > 0

    def test_auction_fee(self, client, cash_payload):
        payload = {**cash_payload, "acquisitionType": "AUCTION"}
        data = client.post("/api/calculate/deal-metrics", json=payload).json()
        assert data["auctioneer_fee"] == pytest.approx(10000)


class TestDealMetricsValidation:
    """Invalid input is rejected before reaching the calculator."""

    def test_non_positive_purchase_price(self, client, cash_payload):
        payload = {**cash_payload, "purchasePrice": 0}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422

    def test_negative_costs(self, client, cash_payload):
        payload = {**cash_payload, "estimatedCosts": -1}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422

    @pytest.mark.parametrize("months", [0, 121])
    def test_holding_period_range(self, client, cash_payload, months):
        payload = {**cash_payload, "estimatedTimeMonths": months}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422

    def test_down_payment_above_price(self, client, financed_payload):
        payload = {**financed_payload, "downPayment": 250000}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422
        assert "cannot exceed purchase price" in response.text

    def test_down_payment_below_minimum(self, client, financed_payload):
        payload = {**financed_payload, "downPayment": 5000}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422
        assert "at least 5%" in response.text

    def test_down_payment_ignored_without_financing(self, client, cash_payload):
        payload = {**cash_payload, "downPayment": 0}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 200

    def test_unknown_acquisition_type(self, client, cash_payload):
        payload = {**cash_payload, "acquisitionType": "GIFT"}
        response = client.post("/api/calculate/deal-metrics", json=payload)
        assert response.status_code == 422


# ============================================================================
# AMORTIZATION / TAX API TESTS
# ============================================================================

class TestAmortizationAPI:
    """Test amortization schedule endpoint."""

    def test_price_schedule(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={"principal": 100000, "annualRate": 6, "termYears": 5},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["system"] == "PRICE"
        assert len(data["schedule"]) == 60
        assert data["first_payment"] == 1933.28
        assert data["total_interest"] > 0

    def test_sac_schedule_with_dates(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 120000,
                "annualRate": 6,
                "termYears": 10,
                "system": "SAC",
                "startDate": "2025-01-01",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["first_payment"] == 1600.0
        assert data["last_payment"] == 1005.0
        assert data["schedule"][0]["date"] == "2025-01-01"

    def test_zero_rate_schedule_is_empty(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={"principal": 100000, "annualRate": 0, "termYears": 5},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["schedule"] == []
        assert data["total_interest"] == 0


class TestCapitalGainsTaxAPI:
    """Test capital gains tax endpoint."""

    def test_brazil_bracket(self, client):
        response = client.post(
            "/api/calculate/capital-gains-tax",
            json={"profit": 5000000, "locale": "pt-BR"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["capital_gains_tax"] == 750000
        assert data["net_profit"] == 4250000

    def test_first_property_exempt(self, client):
        response = client.post(
            "/api/calculate/capital-gains-tax",
            json={"profit": 5000000, "locale": "pt-BR", "isFirstProperty": True},
        )
        assert response.json()["capital_gains_tax"] == 0


# ============================================================================
# LOCALE API TESTS
# ============================================================================

class TestLocaleAPI:
    """Test locale defaults endpoints."""

    def test_list_locales(self, client):
        response = client.get("/api/locales/")
        assert response.status_code == 200
        assert set(response.json()["locales"]) == {"pt-BR", "en-US"}

    def test_brazil_defaults(self, client):
        response = client.get("/api/locales/pt-BR/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["default_interest_rate"] == 11.5
        assert data["loan_term_options"] == [5, 10, 15, 20, 25, 30]
        assert data["currency"] == "BRL"

    def test_unknown_locale_falls_back(self, client):
        response = client.get("/api/locales/ja-JP/defaults")
        assert response.status_code == 200
        data = response.json()
        assert data["locale"] == "en-US"
        assert data["default_interest_rate"] == 7.5


class TestHealthCheck:
    """Test health check endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
