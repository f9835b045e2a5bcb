"""Installment status classification and per-loan aggregates."""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime

from loan_ledger.engine.schedule import as_date
from loan_ledger.models import Installment, InstallmentStatus, Loan

DUE_SOON_DAYS = 7


def days_until_due(installment: Installment, as_of: date | datetime) -> int:
    """Whole days from ``as_of`` to the due date; negative once it has passed."""
    return (installment.due_date - as_date(as_of)).days


def classify_status(
    installment: Installment,
    as_of: date | datetime,
    due_soon_days: int = DUE_SOON_DAYS,
) -> InstallmentStatus:
    """Classify an installment relative to ``as_of``.

    Settled wins over any date. An unsettled installment is overdue once its
    due date is in the past, due soon within ``due_soon_days`` (inclusive)
    and pending beyond that.
    """
    if installment.is_settled:
        return InstallmentStatus.SETTLED

    days = days_until_due(installment, as_of)
    if days < 0:
        return InstallmentStatus.OVERDUE
    if days <= due_soon_days:
        return InstallmentStatus.DUE_SOON
    return InstallmentStatus.PENDING


def status_breakdown(
    loan: Loan,
    as_of: date | datetime,
    due_soon_days: int = DUE_SOON_DAYS,
) -> dict[InstallmentStatus, int]:
    """Count the loan's installments per status (every status present)."""
    counts = Counter(classify_status(inst, as_of, due_soon_days) for inst in loan.schedule)
    return {status: counts.get(status, 0) for status in InstallmentStatus}


def overdue_count(loan: Loan, as_of: date | datetime) -> int:
    return sum(
        1 for inst in loan.schedule if classify_status(inst, as_of) == InstallmentStatus.OVERDUE
    )


def due_soon_count(loan: Loan, as_of: date | datetime, due_soon_days: int = DUE_SOON_DAYS) -> int:
    return sum(
        1
        for inst in loan.schedule
        if classify_status(inst, as_of, due_soon_days) == InstallmentStatus.DUE_SOON
    )


def settled_count(loan: Loan) -> int:
    return sum(1 for inst in loan.schedule if inst.is_settled)
