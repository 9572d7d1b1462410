"""Tests for the HTTP API layer.

Covers:
  - Health, root, schema, defaults
  - /calculate with partial configurations
  - /calculate/schedules and /calculate/sensitivity
  - Deep merge / configuration building
  - Validation errors → 422
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from ownership_cost.api.context import get_default_configuration, get_defaults, get_input_schema
from ownership_cost.api.server import _build_configuration, _deep_merge, app
from ownership_cost.config import CashFinancing, LeasingFinancing, LoanFinancing

client = TestClient(app)

FACTS = {"purchase_price": 300_000, "fuel_type": "Bensin", "fuel_consumption": 0.7}


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestHelpers:

    def test_deep_merge_nested(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        _deep_merge(base, {"b": {"d": 4}, "e": 5})
        assert base == {"a": 1, "b": {"c": 2, "d": 4}, "e": 5}

    def test_build_configuration_defaults(self):
        assert _build_configuration({}).financing == CashFinancing()

    def test_build_configuration_switches_financing_mode(self):
        c = _build_configuration({"financing": {"mode": "loan", "loan_type": "annuity"}})
        assert isinstance(c.financing, LoanFinancing)
        assert c.financing.loan_type == "annuity"
        assert c.financing.down_payment_pct == 20

    def test_build_configuration_lease(self):
        c = _build_configuration({"financing": {"mode": "leasing", "monthly_fee": 2_999}})
        assert c.financing == LeasingFinancing(monthly_fee=2_999)

    def test_defaults_contain_constants(self):
        d = get_defaults()
        assert d["configuration"] == get_default_configuration()
        assert d["constants"]["reference_mileage"] == 1_500
        assert d["constants"]["age_depreciation_curve"][-1]["max_age"] is None

    def test_schema_has_both_inputs(self):
        schema = get_input_schema()
        assert "purchase_price" in schema["facts"]["properties"]
        assert "annual_mileage" in schema["configuration"]["properties"]


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestEndpoints:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "version" in resp.json()

    def test_schema(self):
        resp = client.get("/schema")
        assert resp.status_code == 200
        assert set(resp.json()) == {"facts", "configuration"}

    def test_defaults(self):
        resp = client.get("/defaults")
        assert resp.status_code == 200
        assert resp.json()["configuration"]["financing"] == {"mode": "cash"}

    def test_calculate_minimal(self):
        resp = client.post("/calculate", json={"facts": FACTS, "current_year": 2026})
        assert resp.status_code == 200
        data = resp.json()
        assert data["input"]["fuel_type"] == "gasoline"
        assert data["breakdown"]["fuel"] == 19_425
        assert data["breakdown"]["financing"] == 0

    def test_calculate_reference_scenario(self):
        body = {
            "facts": FACTS,
            "configuration": {"insurance": 300, "ancillary_care": 0},
        }
        breakdown = client.post("/calculate", json=body).json()["breakdown"]
        assert breakdown["depreciation"] == 27_146
        assert breakdown["total_annual"] == 61_671
        assert breakdown["monthly_total"] == 5_139
        assert breakdown["cost_per_km"] == "4.11"

    def test_calculate_with_loan(self):
        body = {
            "facts": {"purchase_price": 200_000, "fuel_type": "Diesel"},
            "configuration": {"financing": {"mode": "loan", "down_payment_pct": 0}},
        }
        breakdown = client.post("/calculate", json=body).json()["breakdown"]
        assert breakdown["monthly_payment"] == 3_403
        assert breakdown["financing"] == 3_403 * 12

    def test_schedules_for_loan(self):
        body = {
            "facts": {"purchase_price": 200_000},
            "configuration": {
                "ownership_years": 3,
                "financing": {"mode": "loan", "loan_type": "annuity", "down_payment_pct": 0},
            },
        }
        resp = client.post("/calculate/schedules", json=body)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["depreciation"]["years"]) == 3
        assert len(data["amortization"]["rows"]) == 36
        assert abs(data["amortization"]["total_principal"] - 200_000) < 1e-6

    def test_schedules_for_cash(self):
        data = client.post("/calculate/schedules", json={"facts": FACTS}).json()
        assert data["amortization"] is None
        assert data["depreciation"]["method"] == "age_bracketed"

    def test_sensitivity_default(self):
        resp = client.post("/calculate/sensitivity", json={"facts": FACTS})
        assert resp.status_code == 200
        data = resp.json()
        assert data["base_monthly_total"] > 0
        assert len(data["bars"]) == 6

    def test_sensitivity_custom_sweep(self):
        body = {
            "facts": FACTS,
            "sweep_params": [{"path": "configuration.annual_mileage", "low_pct": -0.5, "high_pct": 0.5}],
        }
        data = client.post("/calculate/sensitivity", json=body).json()
        assert len(data["bars"]) == 1
        assert data["bars"][0]["param_name"] == "configuration.annual_mileage"


# ═══════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════

class TestValidation:

    def test_missing_facts(self):
        assert client.post("/calculate", json={}).status_code == 422

    def test_negative_price(self):
        resp = client.post("/calculate", json={"facts": {"purchase_price": -5}})
        assert resp.status_code == 422

    def test_invalid_configuration(self):
        body = {"facts": FACTS, "configuration": {"annual_mileage": -100}}
        resp = client.post("/calculate", json=body)
        assert resp.status_code == 422
        assert resp.json()["detail"][0]["loc"] == ["annual_mileage"]

    def test_unknown_financing_mode(self):
        body = {"facts": FACTS, "configuration": {"financing": {"mode": "barter"}}}
        assert client.post("/calculate", json=body).status_code == 422
