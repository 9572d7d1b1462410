"""Ownership configuration — the user's side of the calculation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ownership_cost.config.financing import CashFinancing, Financing
from ownership_cost.config.vehicle import VehicleClass

Level = Literal["low", "normal", "high"]
DepreciationModel = Literal["age_bracketed", "two_tier"]


class OwnershipConfiguration(BaseModel):
    """How the user drives, pays for, and keeps a vehicle.

    Every field has a default, so a partial configuration is always
    complete once validated. Monthly amounts (insurance, parking,
    ancillary care) are annualized by the calculator.
    """

    model_config = ConfigDict(frozen=True)

    # --- Driving & fuel ---
    annual_mileage: float = Field(default=1_500.0, ge=0, description="Distance driven per year (mil, 1 mil = 10 km)")
    primary_fuel_price: float = Field(default=18.5, ge=0, description="Combustion fuel price per l or kg")
    secondary_fuel_price: float = Field(default=2.5, ge=0, description="Electricity price per kWh")
    secondary_fuel_share: float = Field(
        default=50.0, ge=0, le=100,
        description="Share of distance driven on electricity (%), plug-in hybrids only",
    )

    # --- Vehicle assumptions ---
    vehicle_class: VehicleClass | None = Field(
        default=None,
        description="Overrides the listing's size class when set",
    )
    maintenance_level: Level = Field(default="normal", description="Service & repair spending level")
    depreciation_rate: Level = Field(default="normal", description="Risk adjustment on the depreciation model")
    depreciation_model: DepreciationModel = Field(
        default="age_bracketed",
        description="'age_bracketed' = age curve × fuel multiplier × risk factor; "
                    "'two_tier' = flat first-year / later-year rates",
    )
    ownership_years: int = Field(default=5, ge=0, le=30, description="Planned ownership horizon (years)")

    # --- Monthly fixed costs ---
    insurance: float = Field(default=500.0, ge=0, description="Insurance per month")
    parking: float = Field(default=0.0, ge=0, description="Parking per month")
    ancillary_care: float = Field(default=250.0, ge=0, description="Washing & care per month")

    # --- Financing ---
    financing: Financing = Field(default_factory=CashFinancing)

    # --- Tax ---
    annual_tax: float = Field(
        default=2_000.0, ge=0,
        description="Annual vehicle tax. Left at the system default, the fuel-type default is used instead",
    )
    has_malus_tax: bool = Field(default=False, description="Vehicle is subject to malus (CO₂ surcharge)")
    malus_tax_amount: float = Field(default=0.0, ge=0, description="Annual malus surcharge")

    # --- Overrides ---
    annual_tire_cost: float | None = Field(
        default=None, ge=0,
        description="Manual annual tire cost; None or 0 = derive from mileage and vehicle class",
    )
