"""Pipeline — assemble then calculate, in one call.

Each call builds a fresh NormalizedComputationInput and CostBreakdown;
nothing is cached or shared between calls.
"""

from __future__ import annotations

from ownership_cost.config.constants import DEFAULT_CONSTANTS, CostConstants
from ownership_cost.config.ownership import OwnershipConfiguration
from ownership_cost.config.vehicle import VehicleFacts
from ownership_cost.engine.assembler import assemble
from ownership_cost.engine.calculator import calculate
from ownership_cost.models.inputs import NormalizedComputationInput
from ownership_cost.models.results import CostBreakdown


def estimate_costs(
    facts: VehicleFacts,
    configuration: OwnershipConfiguration,
    constants: CostConstants = DEFAULT_CONSTANTS,
    *,
    current_year: int | None = None,
) -> tuple[NormalizedComputationInput, CostBreakdown]:
    """Return the normalized input together with its breakdown."""
    inp = assemble(facts, configuration, constants, current_year=current_year)
    return inp, calculate(inp, constants)
