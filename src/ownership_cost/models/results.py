"""Result types — the contract between the engine and its consumers.

Every result is frozen and recomputed from scratch on each call;
presentation, export and history layers read them but never mutate them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Cost breakdown
# ═══════════════════════════════════════════════════════════════════════════

class CostBreakdown(BaseModel):
    """Annual cost of ownership, per category and in total.

    All amounts are whole currency units per year unless noted.

    Key identities:
      variable_costs = fuel + maintenance + tires
      fixed_costs    = tax + insurance + parking + ancillary_care + financing + depreciation
      total_annual   = variable_costs + fixed_costs
      financing      = monthly_payment × 12   (exactly)
    """

    model_config = ConfigDict(frozen=True)

    fuel: int
    depreciation: int
    tax: int
    maintenance: int
    tires: int
    insurance: int
    parking: int
    ancillary_care: int
    financing: int
    """Annualized from the rounded monthly payment, never computed independently."""
    monthly_payment: int
    """Loan installment or leasing fee per month. 0 for cash purchases."""

    variable_costs: int
    fixed_costs: int
    total_annual: int
    cost_per_mil: int
    """Total per mil (10 km). 0 when annual mileage is 0."""
    cost_per_km: str
    """Total per km with two decimals, for display."""
    monthly_total: int


# ═══════════════════════════════════════════════════════════════════════════
# Depreciation schedule
# ═══════════════════════════════════════════════════════════════════════════

class DepreciationYear(BaseModel):
    """One ownership year of the declining-balance depreciation loop."""

    model_config = ConfigDict(frozen=True)

    year: int
    """1-indexed ownership year."""
    age_at_start: int
    base_rate: float
    effective_rate: float
    """base_rate × fuel multiplier × override factor, clamped to [0, 1]."""
    opening_value: float
    loss: float
    closing_value: float


class DepreciationSchedule(BaseModel):
    """Year-by-year value loss over the ownership horizon."""

    model_config = ConfigDict(frozen=True)

    method: str
    """'age_bracketed' or 'two_tier'."""
    purchase_price: float
    years: list[DepreciationYear]
    total_depreciation: float
    annual_depreciation: float
    """total_depreciation / ownership years (0 for a zero horizon)."""
    residual_value: float


# ═══════════════════════════════════════════════════════════════════════════
# Loan amortization schedule
# ═══════════════════════════════════════════════════════════════════════════

class AmortizationRow(BaseModel):
    """One month of a loan."""

    model_config = ConfigDict(frozen=True)

    month: int
    opening_balance: float
    interest: float
    principal: float
    payment: float
    closing_balance: float


class AmortizationSchedule(BaseModel):
    """Month-by-month loan schedule (unrounded)."""

    model_config = ConfigDict(frozen=True)

    loan_type: str
    principal: float
    monthly_rate: float
    num_payments: int
    balloon: float
    """Residual still owed after the last installment. 0 for annuity loans."""
    rows: list[AmortizationRow]
    total_interest: float
    total_principal: float


# ═══════════════════════════════════════════════════════════════════════════
# Sensitivity
# ═══════════════════════════════════════════════════════════════════════════

class TornadoBar(BaseModel):
    """Effect of sweeping one input on the monthly total."""

    model_config = ConfigDict(frozen=True)

    param_name: str
    param_path: str
    """Dot-path, e.g. 'configuration.annual_mileage'."""
    base_value: float
    low_value: float
    high_value: float
    monthly_total_at_low: int
    monthly_total_at_high: int
    delta_monthly_total: int
    """abs(high − low) — total swing width."""


class SensitivityResult(BaseModel):
    """Tornado data sorted by swing, largest first."""

    model_config = ConfigDict(frozen=True)

    base_monthly_total: int
    bars: list[TornadoBar]
