"""Sensitivity / tornado analysis.

Vary one input at a time by a low/high percentage, re-run the pipeline,
and measure the swing in monthly total cost. Bars are sorted by swing,
so the assumptions that matter most come first.

Default sweep set:
  - facts.purchase_price                 ± 15%
  - configuration.annual_mileage         ± 25%
  - configuration.primary_fuel_price     ± 10%
  - configuration.secondary_fuel_price   ± 10%
  - configuration.insurance              ± 20%
  - configuration.ownership_years        ± 40%
"""

from __future__ import annotations

from typing import get_args

from pydantic import BaseModel

from ownership_cost.config.constants import DEFAULT_CONSTANTS, CostConstants
from ownership_cost.config.ownership import OwnershipConfiguration
from ownership_cost.config.vehicle import VehicleFacts
from ownership_cost.engine.pipeline import estimate_costs
from ownership_cost.models.results import SensitivityResult, TornadoBar

# (name, path, low_pct, high_pct)
DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Purchase price", "facts.purchase_price", -0.15, 0.15),
    ("Annual mileage", "configuration.annual_mileage", -0.25, 0.25),
    ("Fuel price", "configuration.primary_fuel_price", -0.10, 0.10),
    ("Electricity price", "configuration.secondary_fuel_price", -0.10, 0.10),
    ("Insurance", "configuration.insurance", -0.20, 0.20),
    ("Ownership years", "configuration.ownership_years", -0.40, 0.40),
]


def _get_nested_attr(obj: object, parts: list[str]) -> float:
    """Read a numeric field via dot-path parts. Raises AttributeError if absent."""
    current = obj
    for part in parts:
        current = getattr(current, part)
    if current is None or isinstance(current, bool):
        raise AttributeError(".".join(parts))
    return float(current)


def _with_nested_attr(model: BaseModel, parts: list[str], value: float) -> BaseModel:
    """Copy of a frozen model with one nested field replaced.

    Integer fields (optional or not) get the swept value rounded. Each
    level is re-validated, so a sweep that pushes a value out of range
    raises ``ValidationError`` instead of reaching the engine.
    """
    name = parts[0]
    if len(parts) > 1:
        new_value = _with_nested_attr(getattr(model, name), parts[1:], value)
    else:
        field_info = type(model).model_fields.get(name)
        if field_info and (field_info.annotation is int or int in get_args(field_info.annotation)):
            value = round(value)
        new_value = value
    return type(model).model_validate({**dict(model), name: new_value})


def _monthly_total(
    facts: VehicleFacts,
    configuration: OwnershipConfiguration,
    constants: CostConstants,
    current_year: int | None,
) -> int:
    _, breakdown = estimate_costs(facts, configuration, constants, current_year=current_year)
    return breakdown.monthly_total


def run_sensitivity(
    facts: VehicleFacts,
    configuration: OwnershipConfiguration,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    constants: CostConstants = DEFAULT_CONSTANTS,
    *,
    current_year: int | None = None,
) -> SensitivityResult:
    """Run a one-at-a-time sweep around the base case.

    Parameters
    ----------
    facts, configuration :
        Base case.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Paths start with ``facts.`` or ``configuration.``. None = DEFAULT_SWEEPS.
        Paths that don't resolve (e.g. a loan field under cash financing)
        are skipped.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = {"facts": facts, "configuration": configuration}
    base_total = _monthly_total(facts, configuration, constants, current_year)

    bars: list[TornadoBar] = []
    for name, path, low_pct, high_pct in sweeps:
        root, *parts = path.split(".")
        if root not in base or not parts:
            continue
        try:
            base_val = _get_nested_attr(base[root], parts)
        except AttributeError:
            continue

        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        totals = []
        for swept in (low_val, high_val):
            variant = dict(base)
            variant[root] = _with_nested_attr(base[root], parts, swept)
            totals.append(_monthly_total(variant["facts"], variant["configuration"], constants, current_year))
        total_low, total_high = totals

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            monthly_total_at_low=total_low,
            monthly_total_at_high=total_high,
            delta_monthly_total=abs(total_high - total_low),
        ))

    bars.sort(key=lambda b: b.delta_monthly_total, reverse=True)

    return SensitivityResult(base_monthly_total=base_total, bars=bars)
