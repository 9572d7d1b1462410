"""Configuration models — vehicle facts, ownership settings, constants."""

from ownership_cost.config.vehicle import EstimatedFields, FuelType, VehicleClass, VehicleFacts
from ownership_cost.config.financing import CashFinancing, Financing, LeasingFinancing, LoanFinancing
from ownership_cost.config.ownership import DepreciationModel, Level, OwnershipConfiguration
from ownership_cost.config.constants import (
    DEFAULT_CONSTANTS,
    CostConstants,
    DepreciationBracket,
    TwoTierRates,
)

__all__ = [
    "VehicleFacts",
    "EstimatedFields",
    "FuelType",
    "VehicleClass",
    "OwnershipConfiguration",
    "Level",
    "DepreciationModel",
    "Financing",
    "CashFinancing",
    "LoanFinancing",
    "LeasingFinancing",
    "CostConstants",
    "DepreciationBracket",
    "TwoTierRates",
    "DEFAULT_CONSTANTS",
]
