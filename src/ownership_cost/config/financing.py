"""Financing configuration — cash, loan, or leasing as a tagged union.

Each variant carries only the fields that apply to it, so a cash purchase
never drags loan terms around and a lease never sees a residual value.
The union is discriminated on ``mode``.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CashFinancing(BaseModel):
    """Vehicle paid in full up front; no financing cost."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["cash"] = "cash"


class LoanFinancing(BaseModel):
    """Car loan, either balloon/residual or fully amortizing (annuity).

    ``monthly_admin_fee`` is carried for display only: the quoted
    ``interest_rate`` is treated as the effective rate, which already
    includes the lender's fees.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["loan"] = "loan"
    loan_type: Literal["residual", "annuity"] = Field(
        default="residual",
        description="'residual' = balloon loan with a residual due at term end; "
                    "'annuity' = fully amortizing loan",
    )
    down_payment_pct: float = Field(default=20.0, ge=0, le=100, description="Down payment (% of price)")
    residual_value_pct: float = Field(
        default=50.0, ge=0, le=100,
        description="Balloon due at term end (% of price). Ignored for annuity loans.",
    )
    interest_rate: float = Field(default=5.0, ge=0, le=100, description="Effective annual interest rate (%)")
    loan_years: int = Field(default=3, ge=0, le=15, description="Loan term (years)")
    monthly_admin_fee: float = Field(default=60.0, ge=0, description="Lender admin fee per month")


class LeasingFinancing(BaseModel):
    """Operating lease with a fixed monthly fee."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["leasing"] = "leasing"
    leasing_type: Literal["private", "business"] = Field(default="private", description="Lease sub-type")
    monthly_fee: float = Field(default=3_500.0, ge=0, description="Monthly leasing fee")
    includes_insurance: bool = Field(
        default=False,
        description="True when the fee bundles insurance; the separate insurance line is then zeroed",
    )


Financing = Annotated[
    Union[CashFinancing, LoanFinancing, LeasingFinancing],
    Field(discriminator="mode"),
]
