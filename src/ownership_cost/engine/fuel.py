"""Fuel-type normalization, vehicle classification, and fuel cost.

Listings describe fuel in free text ("Bensin", "Laddhybrid", "100% El",
"Plug-in hybrid"). ``normalize_fuel_type`` maps that text onto the closed
``FuelType`` vocabulary by case-insensitive substring match. Order
matters: "diesel" contains "el" and "elhybrid" contains "el", so the
combustion and hybrid checks run before the electric one.

Fuel cost per mil (10 km):
  single fuel:  consumption × primary_price
  blended:      consumption × (primary × (1 − s) + secondary × s)
"""

from __future__ import annotations

import logging

from ownership_cost.config.vehicle import FuelType, VehicleClass

logger = logging.getLogger(__name__)

# Checked top to bottom; first match wins.
FUEL_SYNONYMS: tuple[tuple[FuelType, tuple[str, ...]], ...] = (
    ("gasoline", ("bensin", "petrol", "gasoline")),
    ("diesel", ("diesel", "hvo")),
    ("plug_in_hybrid", ("laddhybrid", "plug-in", "plugin", "phev")),
    ("hybrid", ("hybrid", "elhybrid")),
    ("electric", ("electric", "elbil", "el")),
    ("ethanol", ("e85", "etanol", "ethanol")),
    ("biogas", ("biogas", "fordonsgas", "cng", "lpg", "gas")),
)

DEFAULT_FUEL_TYPE: FuelType = "gasoline"


def normalize_fuel_type(raw: str | None) -> FuelType:
    """Map free-text fuel description to a ``FuelType``. Unknown → gasoline."""
    text = (raw or "").lower().strip()
    for fuel_type, synonyms in FUEL_SYNONYMS:
        if any(s in text for s in synonyms):
            return fuel_type
    logger.debug("Unrecognized fuel type %r, assuming %s", raw, DEFAULT_FUEL_TYPE)
    return DEFAULT_FUEL_TYPE


# ── Vehicle classification ─────────────────────────────────────────────

LUXURY_BRANDS = (
    "porsche", "bmw", "mercedes", "audi", "lexus", "jaguar", "maserati",
    "bentley", "rolls", "ferrari", "lamborghini", "aston martin", "tesla",
)
LARGE_MODELS = (
    "xc90", "xc60", "q7", "q8", "x5", "x6", "x7", "gle", "gls", "cayenne",
    "touareg", "land cruiser", "bigster", "discovery", "range rover",
    "defender", "navigator", "escalade", "tahoe", "suburban",
)
SIMPLE_MODELS = (
    "up", "mii", "citigo", "aygo", "c1", "108", "twingo", "smart", "i10",
    "picanto", "spark", "sandero", "spring", "logan", "ka", "fiesta", "500",
    "panda", "alto", "celerio",
)
BUDGET_BRANDS = ("dacia", "seat", "skoda", "fiat", "suzuki")


def infer_vehicle_class(
    model: str | None,
    brand: str | None,
    power: float | None,
) -> VehicleClass:
    """Estimate the size class from brand, model name, and engine power (hp).

    Used by extractors when a listing has no explicit class; the result
    should be flagged as estimated on ``VehicleFacts``.
    """
    model_lower = (model or "").lower()
    brand_lower = (brand or "").lower()

    if any(b in brand_lower for b in LUXURY_BRANDS):
        return "luxury" if power and power > 300 else "large"
    if any(m in model_lower for m in LARGE_MODELS):
        return "large"
    if any(m in model_lower for m in SIMPLE_MODELS):
        return "simple"
    if any(b in brand_lower for b in BUDGET_BRANDS) and (not power or power < 150):
        return "simple"

    if power:
        if power > 300:
            return "large"
        if power < 100:
            return "simple"
    return "normal"


# ── Fuel cost ──────────────────────────────────────────────────────────

def fuel_cost_per_mil(
    consumption: float,
    primary_price: float,
    secondary_price: float = 0.0,
    secondary_share_pct: float = 0.0,
    has_secondary_fuel: bool = False,
) -> float:
    """Fuel cost for one mil, blended by share when a secondary fuel is active."""
    if not has_secondary_fuel:
        return consumption * primary_price
    share = secondary_share_pct / 100.0
    return consumption * (primary_price * (1.0 - share) + secondary_price * share)
