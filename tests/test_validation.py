"""Pydantic validation tests — invalid inputs are rejected at the boundary.

The assembler and calculator never raise; structural violations (negative
prices, distances, rates, out-of-range percentages) must be stopped here.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ownership_cost.config import (
    CashFinancing,
    CostConstants,
    DEFAULT_CONSTANTS,
    LeasingFinancing,
    LoanFinancing,
    OwnershipConfiguration,
    VehicleFacts,
)


class TestVehicleFactsValidation:

    def test_minimal_listing_is_valid(self):
        facts = VehicleFacts(purchase_price=150_000)
        assert facts.fuel_type == "gasoline"
        assert facts.vehicle_class == "normal"
        assert facts.is_estimated.fuel_consumption is False

    def test_price_required(self):
        with pytest.raises(ValidationError):
            VehicleFacts()

    @pytest.mark.parametrize("price", [0, -1, -250_000])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError):
            VehicleFacts(purchase_price=price)

    def test_negative_consumption_rejected(self):
        with pytest.raises(ValidationError):
            VehicleFacts(purchase_price=100_000, fuel_consumption=-0.5)

    def test_unknown_class_rejected(self):
        with pytest.raises(ValidationError):
            VehicleFacts(purchase_price=100_000, vehicle_class="compact")

    def test_frozen(self):
        facts = VehicleFacts(purchase_price=100_000)
        with pytest.raises(ValidationError):
            facts.purchase_price = 1


class TestConfigurationValidation:

    def test_defaults_are_valid(self):
        c = OwnershipConfiguration()
        assert c.annual_mileage == 1_500
        assert c.financing == CashFinancing()
        assert c.annual_tax == DEFAULT_CONSTANTS.default_annual_tax

    def test_negative_mileage_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(annual_mileage=-1)

    def test_share_above_100_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(secondary_fuel_share=101)

    def test_negative_horizon_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(ownership_years=-1)

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(maintenance_level="extreme")

    def test_negative_fuel_price_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(primary_fuel_price=-18.5)


class TestFinancingUnion:

    def test_mode_selects_variant(self):
        assert isinstance(OwnershipConfiguration(financing={"mode": "loan"}).financing, LoanFinancing)
        assert isinstance(OwnershipConfiguration(financing={"mode": "leasing"}).financing, LeasingFinancing)
        assert isinstance(OwnershipConfiguration(financing={"mode": "cash"}).financing, CashFinancing)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            OwnershipConfiguration(financing={"mode": "barter"})

    def test_down_payment_above_100_rejected(self):
        with pytest.raises(ValidationError):
            LoanFinancing(down_payment_pct=120)

    def test_negative_rate_rejected(self):
        with pytest.raises(ValidationError):
            LoanFinancing(interest_rate=-1)

    def test_unknown_loan_type_rejected(self):
        with pytest.raises(ValidationError):
            LoanFinancing(loan_type="interest_only")

    def test_negative_lease_fee_rejected(self):
        with pytest.raises(ValidationError):
            LeasingFinancing(monthly_fee=-100)


class TestConstants:

    def test_tables_cover_every_fuel(self):
        fuels = {"gasoline", "diesel", "hybrid", "plug_in_hybrid", "electric", "ethanol", "biogas"}
        c = DEFAULT_CONSTANTS
        for table in (
            c.fuel_depreciation_multipliers,
            c.default_tax_by_fuel,
            c.estimated_consumption,
        ):
            assert set(table) == fuels

    def test_tables_cover_every_class(self):
        classes = {"simple", "normal", "large", "luxury"}
        assert set(DEFAULT_CONSTANTS.maintenance_costs) == classes
        assert set(DEFAULT_CONSTANTS.tire_costs) == classes

    def test_curve_ends_open(self):
        assert DEFAULT_CONSTANTS.age_depreciation_curve[-1].max_age is None

    def test_constants_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONSTANTS.reference_mileage = 1_000

    def test_constant_tables_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CONSTANTS.maintenance_costs["normal"]["normal"] = 0
        with pytest.raises(TypeError):
            DEFAULT_CONSTANTS.tire_costs["normal"] = 0
        assert DEFAULT_CONSTANTS.maintenance_costs["normal"]["normal"] == 8_000

    def test_custom_tables_read_only(self):
        c = CostConstants(maintenance_costs={"normal": {"normal": 1_000}})
        with pytest.raises(TypeError):
            c.maintenance_costs["normal"]["normal"] = 0
        assert c.model_dump()["maintenance_costs"] == {"normal": {"normal": 1_000}}

    def test_bracket_rate_bounds(self):
        with pytest.raises(ValidationError):
            CostConstants(age_depreciation_curve=({"max_age": None, "rate": 1.5},))
