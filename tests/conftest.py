"""Shared test fixtures — a typical gasoline listing and owner configuration.

The engine is total only for structurally valid input; negative prices,
distances or NaN are rejected by the pydantic models before they reach
the assembler, so no test feeds them to ``calculate``.
"""

from __future__ import annotations

import pytest

from ownership_cost.config import (
    CashFinancing,
    LeasingFinancing,
    LoanFinancing,
    OwnershipConfiguration,
    VehicleFacts,
)
from ownership_cost.models import NormalizedComputationInput

CURRENT_YEAR = 2026


def _make_input(**overrides) -> NormalizedComputationInput:
    """Normalized input for a 3-year-old gasoline car; override any field."""
    fields = dict(
        purchase_price=300_000,
        fuel_consumption=0.7,
        fuel_type="gasoline",
        vehicle_class="normal",
        vehicle_age=3,
        primary_fuel_price=18.5,
        has_secondary_fuel=False,
        secondary_fuel_price=2.5,
        secondary_fuel_share=0,
        annual_mileage=1_500,
        maintenance_level="normal",
        depreciation_rate="normal",
        depreciation_model="age_bracketed",
        ownership_years=5,
        insurance=500,
        parking=0,
        ancillary_care=250,
        financing=CashFinancing(),
        annual_tax=2_000,
        has_malus_tax=False,
        malus_tax_amount=0,
        annual_tire_cost=None,
    )
    fields.update(overrides)
    return NormalizedComputationInput(**fields)


@pytest.fixture
def make_input():
    """Factory for NormalizedComputationInput with test defaults."""
    return _make_input


@pytest.fixture
def facts() -> VehicleFacts:
    return VehicleFacts(
        purchase_price=300_000,
        fuel_type="Bensin",
        fuel_consumption=0.7,
        vehicle_name="Volvo V60 2021",
        model_year=2021,
        mileage=4_500,
        engine_power=197,
        co2_emissions=155,
        vehicle_class="normal",
    )


@pytest.fixture
def configuration() -> OwnershipConfiguration:
    return OwnershipConfiguration(
        annual_mileage=1_500,
        primary_fuel_price=18.5,
        secondary_fuel_price=2.5,
        secondary_fuel_share=50,
        maintenance_level="normal",
        depreciation_rate="normal",
        ownership_years=5,
        insurance=500,
        parking=0,
        ancillary_care=250,
        annual_tax=2_000,
    )


@pytest.fixture
def residual_loan() -> LoanFinancing:
    return LoanFinancing(
        loan_type="residual",
        down_payment_pct=0,
        residual_value_pct=50,
        interest_rate=5.0,
        loan_years=3,
    )


@pytest.fixture
def annuity_loan() -> LoanFinancing:
    return LoanFinancing(
        loan_type="annuity",
        down_payment_pct=0,
        interest_rate=5.0,
        loan_years=3,
    )


@pytest.fixture
def lease() -> LeasingFinancing:
    return LeasingFinancing(monthly_fee=3_500)
