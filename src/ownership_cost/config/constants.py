"""Cost model constants — every lookup table the engine reads.

Tables are plain key → value data keyed by closed literals, never
chained conditionals. The whole set is one frozen ``CostConstants``
instance passed explicitly to ``assemble`` and ``calculate``; callers
wanting different market assumptions build their own instance.

Values reflect the Swedish used-car market (SEK, mil = 10 km).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

_TABLES = (
    "fuel_depreciation_multipliers",
    "depreciation_override_factors",
    "two_tier_depreciation_rates",
    "maintenance_costs",
    "tire_costs",
    "default_tax_by_fuel",
    "estimated_consumption",
)


def _freeze(value: Any) -> Any:
    """Read-only view of a (possibly nested) table."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    return value


class DepreciationBracket(BaseModel):
    """One step of the age depreciation curve.

    Applies to vehicles with ``age < max_age``. ``max_age=None`` is the
    open-ended last bracket.
    """

    model_config = ConfigDict(frozen=True)

    max_age: int | None
    rate: float = Field(ge=0, le=1)


class TwoTierRates(BaseModel):
    """Flat first-year / later-years depreciation rates."""

    model_config = ConfigDict(frozen=True)

    year1: float = Field(ge=0, le=1)
    year_n: float = Field(ge=0, le=1)


class CostConstants(BaseModel):
    """Market constants driving the cost model.

    Tables are stored as read-only mappings, so neither the instance nor
    its nested tables can be changed after construction.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    # --- Depreciation ---
    age_depreciation_curve: tuple[DepreciationBracket, ...] = (
        DepreciationBracket(max_age=1, rate=0.25),     # year 0→1
        DepreciationBracket(max_age=3, rate=0.15),     # years 1→3
        DepreciationBracket(max_age=5, rate=0.10),     # years 3→5
        DepreciationBracket(max_age=8, rate=0.06),     # years 5→8
        DepreciationBracket(max_age=None, rate=0.04),  # 8+
    )
    fuel_depreciation_multipliers: Mapping[str, float] = Field(default_factory=lambda: {
        "gasoline": 0.75,
        "diesel": 1.00,
        "hybrid": 0.80,
        "plug_in_hybrid": 0.90,
        "electric": 1.25,
        "ethanol": 1.10,
        "biogas": 1.10,
    })
    depreciation_override_factors: Mapping[str, float] = Field(default_factory=lambda: {
        "low": 0.75,
        "normal": 1.00,
        "high": 1.30,
    })
    two_tier_depreciation_rates: Mapping[str, TwoTierRates] = Field(default_factory=lambda: {
        "low": TwoTierRates(year1=0.10, year_n=0.08),
        "normal": TwoTierRates(year1=0.15, year_n=0.12),
        "high": TwoTierRates(year1=0.20, year_n=0.15),
    })

    # --- Running costs (per year at reference_mileage) ---
    maintenance_costs: Mapping[str, Mapping[str, float]] = Field(default_factory=lambda: {
        "simple": {"low": 3_000, "normal": 5_000, "high": 8_000},
        "normal": {"low": 5_000, "normal": 8_000, "high": 12_000},
        "large": {"low": 8_000, "normal": 12_000, "high": 18_000},
        "luxury": {"low": 12_000, "normal": 20_000, "high": 35_000},
    })
    tire_costs: Mapping[str, float] = Field(default_factory=lambda: {
        "simple": 4_000,
        "normal": 6_000,
        "large": 10_000,
        "luxury": 15_000,
    })

    # --- Fuel-type defaults ---
    default_tax_by_fuel: Mapping[str, float] = Field(default_factory=lambda: {
        "gasoline": 2_000,
        "diesel": 2_500,
        "electric": 360,
        "hybrid": 1_500,
        "plug_in_hybrid": 1_200,
        "ethanol": 1_800,
        "biogas": 1_500,
    })
    estimated_consumption: Mapping[str, float] = Field(default_factory=lambda: {
        "gasoline": 0.7,        # l/mil
        "diesel": 0.6,
        "electric": 2.0,        # kWh/mil
        "hybrid": 0.5,
        "plug_in_hybrid": 0.4,
        "ethanol": 0.9,
        "biogas": 0.8,          # kg/mil
    })

    # --- Scalars ---
    default_annual_tax: float = 2_000.0
    """Configured tax equal to this value counts as 'not customized'."""
    reference_mileage: float = 1_500.0
    """Mileage (mil/year) at which the maintenance table applies unscaled."""
    tire_lifetime_km: float = 60_000.0
    min_tire_interval_years: float = 2.0
    max_tire_interval_years: float = 5.0
    km_per_mil: float = 10.0

    @field_validator(*_TABLES)
    @classmethod
    def _read_only_table(cls, value: Mapping) -> Mapping:
        return _freeze(value)

    @field_serializer(*_TABLES, mode="wrap")
    def _dump_table(self, value: Mapping, handler):
        return handler(_thaw(value))


DEFAULT_CONSTANTS = CostConstants()
