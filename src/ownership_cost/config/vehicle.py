"""Vehicle facts — the listing-side input produced by page extraction."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FuelType = Literal[
    "gasoline",
    "diesel",
    "plug_in_hybrid",
    "hybrid",
    "electric",
    "ethanol",
    "biogas",
]

VehicleClass = Literal["simple", "normal", "large", "luxury"]


class EstimatedFields(BaseModel):
    """Which listing fields were estimated rather than read off the page."""

    model_config = ConfigDict(frozen=True)

    fuel_consumption: bool = False
    vehicle_class: bool = False


class VehicleFacts(BaseModel):
    """One vehicle listing. Immutable once extracted."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    # --- Price & fuel ---
    purchase_price: float = Field(gt=0, description="Asking price (currency units)")
    fuel_type: str = Field(
        default="gasoline",
        description="Free-text fuel type as found on the listing; normalized by the assembler",
    )
    fuel_type_label: str | None = Field(default=None, description="Original fuel label for display")
    fuel_consumption: float | None = Field(
        default=None, ge=0,
        description="Measured consumption per mil (10 km) in l, kWh or kg. None = estimate from fuel type",
    )

    # --- Identity ---
    vehicle_name: str | None = Field(default=None, description="Display name, e.g. 'Volvo XC40 2023'")
    model_year: int | None = Field(default=None, description="Model year; None if not extracted")
    mileage: float | None = Field(default=None, ge=0, description="Odometer reading (mil)")
    engine_power: float | None = Field(default=None, ge=0, description="Engine power (hp)")
    co2_emissions: float | None = Field(default=None, ge=0, description="CO₂ emissions (g/km)")
    vehicle_class: VehicleClass = Field(
        default="normal",
        description="Coarse size class driving maintenance and tire tables",
    )

    # --- Listing-quoted costs ---
    effective_interest_rate: float | None = Field(
        default=None, ge=0,
        description="Effective APR (%) quoted by the listing; replaces the configured loan rate when > 0",
    )
    annual_tax: float | None = Field(
        default=None, ge=0,
        description="Annual vehicle tax quoted by the listing; preferred over defaults when > 0",
    )

    is_estimated: EstimatedFields = Field(default_factory=EstimatedFields)
