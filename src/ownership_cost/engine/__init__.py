"""Engine — pure cost computation: assemble, then calculate."""

from ownership_cost.engine.assembler import assemble
from ownership_cost.engine.calculator import calculate
from ownership_cost.engine.depreciation import build_depreciation_schedule, get_depreciation_rate_for_age
from ownership_cost.engine.financing import build_amortization_schedule, compute_financing
from ownership_cost.engine.fuel import infer_vehicle_class, normalize_fuel_type
from ownership_cost.engine.pipeline import estimate_costs
from ownership_cost.engine.sensitivity import run_sensitivity

__all__ = [
    "assemble",
    "calculate",
    "estimate_costs",
    "normalize_fuel_type",
    "infer_vehicle_class",
    "get_depreciation_rate_for_age",
    "build_depreciation_schedule",
    "compute_financing",
    "build_amortization_schedule",
    "run_sensitivity",
]
