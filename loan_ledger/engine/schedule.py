"""Payment schedule generation."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

from loan_ledger.exceptions import InvalidArgumentError
from loan_ledger.models import Installment


def as_date(value: date | datetime) -> date:
    """Return the calendar date of ``value``."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(dt: date, months: int) -> date:
    """Return ``dt`` moved forward ``months`` calendar months.

    The month field rolls forward carrying into the year. A day that does not
    exist in the target month overflows into the next one instead of being
    clamped: 2024-01-31 plus one month is 2024-03-02.

    Raises
    ------
    InvalidArgumentError
        If the result falls outside the supported calendar (after 9999-12-31).
    """
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=dt.day - 1)
    except (ValueError, OverflowError) as exc:
        raise InvalidArgumentError(f"{dt} plus {months} months is out of the calendar range") from exc


def generate_schedule(
    start_date: date | datetime,
    periodic_payment: Decimal,
    term_months: int,
) -> list[Installment]:
    """Build the unsettled installments of a loan.

    Parameters
    ----------
    start_date : date | datetime
        Loan creation date. Installment ``k`` falls due ``k`` months later.
    periodic_payment : Decimal
        Amount of every installment. The final one does not absorb rounding.
    term_months : int
        Number of installments.

    Returns
    -------
    list[Installment]
        Installments ordered by sequence number and due date.
    """
    if term_months <= 0:
        raise InvalidArgumentError(f"Term must be positive, got {term_months}")

    start = as_date(start_date)
    add_months(start, term_months)  # last due date must fit the calendar
    return [
        Installment(
            sequence_number=i,
            due_date=add_months(start, i),
            amount=periodic_payment,
        )
        for i in range(1, term_months + 1)
    ]
