"""Input assembler — one explicit merge/defaulting pass.

VehicleFacts + OwnershipConfiguration → NormalizedComputationInput.

Resolution order:
  consumption  = measured → estimate for fuel type → gasoline estimate
  tax          = listing tax (> 0) → customized config tax → default for fuel type
  primary fuel = electricity price for electric vehicles, combustion price otherwise
  secondary    = carried for plug-in hybrids only; share forced to 0 otherwise
  age          = max(0, current_year − model_year), None when year unknown
  class        = configuration override → listing class
  loan rate    = listing effective rate (> 0) → configured rate
"""

from __future__ import annotations

import datetime
import logging

from ownership_cost.config.constants import DEFAULT_CONSTANTS, CostConstants
from ownership_cost.config.financing import Financing, LoanFinancing
from ownership_cost.config.ownership import OwnershipConfiguration
from ownership_cost.config.vehicle import FuelType, VehicleFacts
from ownership_cost.engine.fuel import DEFAULT_FUEL_TYPE, normalize_fuel_type
from ownership_cost.models.inputs import NormalizedComputationInput

logger = logging.getLogger(__name__)


def resolve_consumption(
    facts: VehicleFacts,
    fuel_type: FuelType,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    """Measured consumption, or the estimate for the fuel type."""
    if facts.fuel_consumption is not None:
        return facts.fuel_consumption
    estimate = constants.estimated_consumption.get(
        fuel_type, constants.estimated_consumption[DEFAULT_FUEL_TYPE]
    )
    logger.debug("No measured consumption, using %s estimate %.2f/mil", fuel_type, estimate)
    return estimate


def resolve_annual_tax(
    facts: VehicleFacts,
    configuration: OwnershipConfiguration,
    fuel_type: FuelType,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    """Pick the annual tax: listing, then user customization, then fuel default."""
    if facts.annual_tax is not None and facts.annual_tax > 0:
        return facts.annual_tax
    if configuration.annual_tax != constants.default_annual_tax:
        return configuration.annual_tax
    tax = constants.default_tax_by_fuel.get(fuel_type, constants.default_annual_tax)
    logger.debug("Using default %s tax %.0f", fuel_type, tax)
    return tax


def resolve_vehicle_age(model_year: int | None, current_year: int) -> int | None:
    if model_year is None:
        return None
    return max(0, current_year - model_year)


def resolve_financing(facts: VehicleFacts, financing: Financing) -> Financing:
    """Apply a listing-quoted effective interest rate to a loan."""
    if (
        isinstance(financing, LoanFinancing)
        and facts.effective_interest_rate is not None
        and facts.effective_interest_rate > 0
    ):
        return financing.model_copy(update={"interest_rate": facts.effective_interest_rate})
    return financing


def assemble(
    facts: VehicleFacts,
    configuration: OwnershipConfiguration,
    constants: CostConstants = DEFAULT_CONSTANTS,
    *,
    current_year: int | None = None,
) -> NormalizedComputationInput:
    """Merge listing facts and user configuration into calculator input.

    Never raises for validated models: every gap is filled with a default.
    ``current_year`` defaults to today's year; pass it to make vehicle age
    reproducible.
    """
    fuel_type = normalize_fuel_type(facts.fuel_type)
    year = current_year if current_year is not None else datetime.date.today().year

    # ── Fuel pricing ───────────────────────────────────────────────────
    # Electricity is configured as the secondary fuel; for a pure EV it
    # becomes the only fuel.
    is_plug_in = fuel_type == "plug_in_hybrid"
    if fuel_type == "electric":
        primary_price = configuration.secondary_fuel_price
    else:
        primary_price = configuration.primary_fuel_price

    return NormalizedComputationInput(
        purchase_price=facts.purchase_price,
        fuel_consumption=resolve_consumption(facts, fuel_type, constants),
        fuel_type=fuel_type,
        vehicle_class=configuration.vehicle_class or facts.vehicle_class,
        vehicle_age=resolve_vehicle_age(facts.model_year, year),
        primary_fuel_price=primary_price,
        has_secondary_fuel=is_plug_in,
        secondary_fuel_price=configuration.secondary_fuel_price,
        secondary_fuel_share=configuration.secondary_fuel_share if is_plug_in else 0.0,
        annual_mileage=configuration.annual_mileage,
        maintenance_level=configuration.maintenance_level,
        depreciation_rate=configuration.depreciation_rate,
        depreciation_model=configuration.depreciation_model,
        ownership_years=configuration.ownership_years,
        insurance=configuration.insurance,
        parking=configuration.parking,
        ancillary_care=configuration.ancillary_care,
        financing=resolve_financing(facts, configuration.financing),
        annual_tax=resolve_annual_tax(facts, configuration, fuel_type, constants),
        has_malus_tax=configuration.has_malus_tax,
        malus_tax_amount=configuration.malus_tax_amount,
        annual_tire_cost=configuration.annual_tire_cost,
    )
