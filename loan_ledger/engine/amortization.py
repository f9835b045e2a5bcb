"""Fixed-payment amortization.

The periodic payment of a fixed-rate loan is the annuity payment

    payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

where ``P`` is the principal, ``r`` the per-period rate as a fraction and
``n`` the number of payments. With ``r == 0`` it reduces to ``P / n``.
"""

from __future__ import annotations

from decimal import Decimal, Overflow, getcontext
from typing import Any

from loan_ledger.exceptions import InvalidArgumentError
from loan_ledger.models import LoanQuote

getcontext().prec = 28

HUNDRED = Decimal(100)


def to_decimal(value: Any) -> Decimal:
    """Convert ``value`` to ``Decimal`` going through ``str`` for floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_periodic_payment(principal: Any, monthly_rate_percent: Any, term_months: int) -> Decimal:
    """Return the fixed payment that amortizes ``principal`` over ``term_months``.

    Parameters
    ----------
    principal : Decimal | int | float | str
        Amount borrowed.
    monthly_rate_percent : Decimal | int | float | str
        Interest per month in percent (15 means 15%).
    term_months : int
        Number of monthly payments.

    Returns
    -------
    Decimal
        Unrounded periodic payment.

    Raises
    ------
    InvalidArgumentError
        If ``term_months`` is zero or negative, or the rate and term are so
        large that the compound factor overflows.
    """
    if term_months <= 0:
        raise InvalidArgumentError(f"Term must be positive, got {term_months}")

    principal = to_decimal(principal)
    rate = to_decimal(monthly_rate_percent) / HUNDRED
    try:
        factor = (1 + rate) ** term_months
        # Rates below the context precision round 1 + r to exactly 1
        if factor == 1:
            return principal / Decimal(term_months)
        return principal * (rate * factor) / (factor - 1)
    except Overflow as exc:
        raise InvalidArgumentError(
            f"Rate {monthly_rate_percent}% over {term_months} months overflows the compound factor"
        ) from exc


def quote_loan(principal: Any, monthly_rate_percent: Any, term_months: int) -> LoanQuote:
    """Preview payment, total payable and total interest without creating a loan."""
    principal = to_decimal(principal)
    payment = compute_periodic_payment(principal, monthly_rate_percent, term_months)
    total = payment * term_months
    return LoanQuote(
        periodic_payment=payment,
        total_payable=total,
        total_interest=total - principal,
    )
