"""Contract models — normalized input and computation results."""

from ownership_cost.models.inputs import NormalizedComputationInput
from ownership_cost.models.results import (
    AmortizationRow,
    AmortizationSchedule,
    CostBreakdown,
    DepreciationSchedule,
    DepreciationYear,
    SensitivityResult,
    TornadoBar,
)

__all__ = [
    "NormalizedComputationInput",
    "CostBreakdown",
    "DepreciationYear",
    "DepreciationSchedule",
    "AmortizationRow",
    "AmortizationSchedule",
    "TornadoBar",
    "SensitivityResult",
]
