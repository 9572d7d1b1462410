"""Financing — monthly payment for cash, loan, and leasing.

Loan principal:
  P = price − price × down_payment%

Residual (balloon) loan:
  residual     = price × residual_value%
  amortization = max(0, P − residual) / n
  interest     = r × (P + residual) / 2          (average outstanding balance)
  payment      = amortization + interest

Annuity loan:
  payment = P × r(1+r)^n / ((1+r)^n − 1),   P / n when r = 0

where r = annual rate / 12 and n = loan_years × 12.

The monthly payment is rounded first and the annual figure is always
``payment × 12``, so monthly and annual never disagree. The admin fee
is not added: the quoted rate is the effective rate and already
includes it.
"""

from __future__ import annotations

from ownership_cost.config.financing import Financing, LeasingFinancing, LoanFinancing
from ownership_cost.engine.rounding import round_half_up
from ownership_cost.models.results import AmortizationRow, AmortizationSchedule


def loan_principal(purchase_price: float, loan: LoanFinancing) -> float:
    return purchase_price - purchase_price * (loan.down_payment_pct / 100.0)


def residual_payment(
    principal: float,
    residual: float,
    monthly_rate: float,
    num_payments: int,
) -> float:
    """Balloon-loan installment: straight amortization down to the residual
    plus interest on the average balance."""
    amortize = max(0.0, principal - residual)
    return amortize / num_payments + (principal + residual) / 2 * monthly_rate


def annuity_payment(principal: float, monthly_rate: float, num_payments: int) -> float:
    """Fully amortizing installment."""
    if monthly_rate > 0:
        factor = (1 + monthly_rate) ** num_payments
        return principal * monthly_rate * factor / (factor - 1)
    return principal / num_payments


def monthly_loan_payment(purchase_price: float, loan: LoanFinancing) -> float:
    """Unrounded loan installment. A zero-year loan costs nothing."""
    if loan.loan_years <= 0:
        return 0.0
    monthly_rate = loan.interest_rate / 100.0 / 12
    num_payments = loan.loan_years * 12
    principal = loan_principal(purchase_price, loan)

    if loan.loan_type == "residual":
        residual = purchase_price * (loan.residual_value_pct / 100.0)
        return residual_payment(principal, residual, monthly_rate, num_payments)
    return annuity_payment(principal, monthly_rate, num_payments)


def compute_financing(purchase_price: float, financing: Financing) -> tuple[int, int]:
    """Return ``(monthly_payment, annual_financing)``, both whole units.

    ``annual_financing`` is exactly ``monthly_payment × 12``.
    """
    if isinstance(financing, LeasingFinancing):
        monthly = round_half_up(financing.monthly_fee)
    elif isinstance(financing, LoanFinancing):
        monthly = round_half_up(monthly_loan_payment(purchase_price, financing))
    else:
        monthly = 0
    return monthly, monthly * 12


def build_amortization_schedule(
    purchase_price: float,
    loan: LoanFinancing,
) -> AmortizationSchedule:
    """Month-by-month schedule for a loan (unrounded).

    Annuity rows charge interest on the remaining balance and pay the rest
    down as principal; the balance reaches 0 after the last payment.
    Residual rows mirror the installment model: flat average-balance
    interest plus straight amortization, leaving the balloon outstanding.
    """
    principal = loan_principal(purchase_price, loan)
    monthly_rate = loan.interest_rate / 100.0 / 12
    num_payments = loan.loan_years * 12

    if num_payments <= 0:
        return AmortizationSchedule(
            loan_type=loan.loan_type, principal=principal, monthly_rate=monthly_rate,
            num_payments=0, balloon=principal, rows=[],
            total_interest=0.0, total_principal=0.0,
        )

    rows: list[AmortizationRow] = []
    balance = principal
    total_interest = 0.0
    total_principal = 0.0

    if loan.loan_type == "residual":
        residual = purchase_price * (loan.residual_value_pct / 100.0)
        amortization = max(0.0, principal - residual) / num_payments
        interest = (principal + residual) / 2 * monthly_rate
    else:
        payment = annuity_payment(principal, monthly_rate, num_payments)

    for m in range(1, num_payments + 1):
        if loan.loan_type == "residual":
            row_interest = interest
            row_principal = amortization
        else:
            row_interest = balance * monthly_rate
            row_principal = payment - row_interest

        closing = balance - row_principal
        rows.append(AmortizationRow(
            month=m,
            opening_balance=balance,
            interest=row_interest,
            principal=row_principal,
            payment=row_interest + row_principal,
            closing_balance=closing,
        ))
        total_interest += row_interest
        total_principal += row_principal
        balance = closing

    return AmortizationSchedule(
        loan_type=loan.loan_type,
        principal=principal,
        monthly_rate=monthly_rate,
        num_payments=num_payments,
        balloon=balance if loan.loan_type == "residual" else 0.0,
        rows=rows,
        total_interest=total_interest,
        total_principal=total_principal,
    )
