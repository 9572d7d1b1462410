"""Normalized computation input — the calculator's only contract.

Built by ``engine.assembler.assemble``. Every optional listing field and
configuration default has been resolved by the time one of these exists;
the calculator never looks at raw facts or raw configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ownership_cost.config.financing import Financing
from ownership_cost.config.ownership import DepreciationModel, Level
from ownership_cost.config.vehicle import FuelType, VehicleClass


class NormalizedComputationInput(BaseModel):
    """Fully resolved scalar inputs for one cost calculation."""

    model_config = ConfigDict(frozen=True)

    # --- Vehicle ---
    purchase_price: float
    fuel_consumption: float
    """Per mil (10 km), measured or estimated."""
    fuel_type: FuelType
    vehicle_class: VehicleClass
    vehicle_age: int | None
    """Years since model year. None = unknown; depreciation then starts at age 0."""

    # --- Fuel pricing ---
    primary_fuel_price: float
    """Electricity price for electric vehicles, combustion fuel price otherwise."""
    has_secondary_fuel: bool
    secondary_fuel_price: float
    secondary_fuel_share: float
    """Percent of distance on the secondary fuel. Always 0 unless plug-in hybrid."""

    # --- Usage & preferences ---
    annual_mileage: float
    maintenance_level: Level
    depreciation_rate: Level
    depreciation_model: DepreciationModel
    ownership_years: int

    # --- Monthly fixed costs ---
    insurance: float
    parking: float
    ancillary_care: float

    # --- Financing & tax ---
    financing: Financing
    annual_tax: float
    has_malus_tax: bool
    malus_tax_amount: float
    annual_tire_cost: float | None
