"""Cost calculator — NormalizedComputationInput → CostBreakdown.

Pure and total: never raises for a structurally valid input, guards
every division. Categories are computed unrounded, summed, and rounded
half-up only at the output. Financing is the exception: it is rounded
per month first (see ``engine.financing``).

  fuel         = fuel_cost_per_mil × annual_mil
  maintenance  = table[class][level] × annual_mil / reference_mil
  tires        = override, or tire_set[class] / clamp(lifetime_km / annual_km, 2, 5)
  insurance    = monthly × 12   (0 when a lease bundles insurance)
  tax          = annual_tax + malus
"""

from __future__ import annotations

from ownership_cost.config.constants import DEFAULT_CONSTANTS, CostConstants
from ownership_cost.config.financing import LeasingFinancing
from ownership_cost.engine.depreciation import compute_annual_depreciation
from ownership_cost.engine.financing import compute_financing
from ownership_cost.engine.fuel import fuel_cost_per_mil
from ownership_cost.engine.rounding import round_half_up
from ownership_cost.models.inputs import NormalizedComputationInput
from ownership_cost.models.results import CostBreakdown


def compute_annual_fuel(inp: NormalizedComputationInput) -> float:
    per_mil = fuel_cost_per_mil(
        inp.fuel_consumption,
        inp.primary_fuel_price,
        inp.secondary_fuel_price,
        inp.secondary_fuel_share,
        inp.has_secondary_fuel,
    )
    return per_mil * inp.annual_mileage


def compute_annual_maintenance(
    inp: NormalizedComputationInput,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    base = constants.maintenance_costs[inp.vehicle_class][inp.maintenance_level]
    return base * (inp.annual_mileage / constants.reference_mileage)


def tire_replacement_interval(
    annual_km: float,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    """Years between tire sets. No driving → the longest interval."""
    if annual_km <= 0:
        return constants.max_tire_interval_years
    return max(
        constants.min_tire_interval_years,
        min(constants.max_tire_interval_years, constants.tire_lifetime_km / annual_km),
    )


def compute_annual_tires(
    inp: NormalizedComputationInput,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    if inp.annual_tire_cost is not None and inp.annual_tire_cost > 0:
        return inp.annual_tire_cost
    annual_km = inp.annual_mileage * constants.km_per_mil
    return constants.tire_costs[inp.vehicle_class] / tire_replacement_interval(annual_km, constants)


def compute_annual_tax(inp: NormalizedComputationInput) -> float:
    return inp.annual_tax + (inp.malus_tax_amount if inp.has_malus_tax else 0.0)


def compute_annual_insurance(inp: NormalizedComputationInput) -> float:
    financing = inp.financing
    if isinstance(financing, LeasingFinancing) and financing.includes_insurance:
        return 0.0
    return inp.insurance * 12


def calculate(
    inp: NormalizedComputationInput,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> CostBreakdown:
    """Compute the full annual cost breakdown for one vehicle."""
    annual_km = inp.annual_mileage * constants.km_per_mil

    # ── Variable costs ─────────────────────────────────────────────────
    fuel = compute_annual_fuel(inp)
    maintenance = compute_annual_maintenance(inp, constants)
    tires = compute_annual_tires(inp, constants)

    # ── Fixed costs ────────────────────────────────────────────────────
    depreciation = compute_annual_depreciation(inp, constants)
    tax = compute_annual_tax(inp)
    insurance = compute_annual_insurance(inp)
    parking = inp.parking * 12
    ancillary_care = inp.ancillary_care * 12
    monthly_payment, financing = compute_financing(inp.purchase_price, inp.financing)

    # ── Totals ─────────────────────────────────────────────────────────
    variable_costs = fuel + maintenance + tires
    fixed_costs = tax + insurance + parking + ancillary_care + financing + depreciation
    total_annual = variable_costs + fixed_costs

    cost_per_mil = total_annual / inp.annual_mileage if inp.annual_mileage > 0 else 0.0
    cost_per_km = total_annual / annual_km if annual_km > 0 else 0.0

    return CostBreakdown(
        fuel=round_half_up(fuel),
        depreciation=round_half_up(depreciation),
        tax=round_half_up(tax),
        maintenance=round_half_up(maintenance),
        tires=round_half_up(tires),
        insurance=round_half_up(insurance),
        parking=round_half_up(parking),
        ancillary_care=round_half_up(ancillary_care),
        financing=financing,
        monthly_payment=monthly_payment,
        variable_costs=round_half_up(variable_costs),
        fixed_costs=round_half_up(fixed_costs),
        total_annual=round_half_up(total_annual),
        cost_per_mil=round_half_up(cost_per_mil),
        cost_per_km=f"{cost_per_km:.2f}",
        monthly_total=round_half_up(total_annual / 12),
    )

