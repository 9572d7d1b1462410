"""Depreciation — declining balance over the ownership horizon.

Age-bracketed model (default):
  base_rate(age)   = first curve bracket with age < max_age
  effective_rate   = clamp(base_rate × fuel_multiplier × override_factor, 0, 1)
  per year:        loss = value × effective_rate;  value −= loss

The age used for each year is the vehicle's age at the *start* of that
ownership year. Unknown age starts at 0, the steepest bracket.

Two-tier model:
  year 1 uses the ``year1`` rate, every later year the ``year_n`` rate;
  no age or fuel adjustment. Same declining-balance loop.

The annual figure is the total loss averaged over the horizon.
"""

from __future__ import annotations

from ownership_cost.config.constants import DEFAULT_CONSTANTS, CostConstants
from ownership_cost.models.inputs import NormalizedComputationInput
from ownership_cost.models.results import DepreciationSchedule, DepreciationYear


def get_depreciation_rate_for_age(
    age: int,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    """Base annual depreciation rate for a vehicle of ``age`` years."""
    curve = constants.age_depreciation_curve
    for bracket in curve:
        if bracket.max_age is None or age < bracket.max_age:
            return bracket.rate
    return curve[-1].rate


def effective_depreciation_rate(
    base_rate: float,
    fuel_multiplier: float,
    override_factor: float,
) -> float:
    return min(1.0, max(0.0, base_rate * fuel_multiplier * override_factor))


def _year_rates(
    inp: NormalizedComputationInput,
    constants: CostConstants,
) -> list[tuple[int, float, float]]:
    """(age_at_start, base_rate, effective_rate) for each ownership year."""
    start_age = inp.vehicle_age if inp.vehicle_age is not None else 0
    rates: list[tuple[int, float, float]] = []

    if inp.depreciation_model == "two_tier":
        tiers = constants.two_tier_depreciation_rates[inp.depreciation_rate]
        for year in range(inp.ownership_years):
            rate = tiers.year1 if year == 0 else tiers.year_n
            rates.append((start_age + year, rate, effective_depreciation_rate(rate, 1.0, 1.0)))
        return rates

    fuel_multiplier = constants.fuel_depreciation_multipliers.get(inp.fuel_type, 1.0)
    override_factor = constants.depreciation_override_factors[inp.depreciation_rate]
    for year in range(inp.ownership_years):
        age = start_age + year
        base = get_depreciation_rate_for_age(age, constants)
        rates.append((age, base, effective_depreciation_rate(base, fuel_multiplier, override_factor)))
    return rates


def build_depreciation_schedule(
    inp: NormalizedComputationInput,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> DepreciationSchedule:
    """Run the declining-balance loop and record every year."""
    value = inp.purchase_price
    total = 0.0
    years: list[DepreciationYear] = []

    for i, (age, base_rate, rate) in enumerate(_year_rates(inp, constants), start=1):
        loss = value * rate
        years.append(DepreciationYear(
            year=i,
            age_at_start=age,
            base_rate=base_rate,
            effective_rate=rate,
            opening_value=value,
            loss=loss,
            closing_value=value - loss,
        ))
        total += loss
        value -= loss

    annual = total / inp.ownership_years if inp.ownership_years > 0 else 0.0

    return DepreciationSchedule(
        method=inp.depreciation_model,
        purchase_price=inp.purchase_price,
        years=years,
        total_depreciation=total,
        annual_depreciation=annual,
        residual_value=value,
    )


def compute_annual_depreciation(
    inp: NormalizedComputationInput,
    constants: CostConstants = DEFAULT_CONSTANTS,
) -> float:
    """Average annual depreciation over the ownership horizon (unrounded)."""
    return build_depreciation_schedule(inp, constants).annual_depreciation
