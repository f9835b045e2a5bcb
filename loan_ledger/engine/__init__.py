"""Amortization, scheduling and status classification."""

from loan_ledger.engine.amortization import compute_periodic_payment, quote_loan
from loan_ledger.engine.schedule import add_months, generate_schedule
from loan_ledger.engine.status import (
    classify_status,
    due_soon_count,
    overdue_count,
    settled_count,
    status_breakdown,
)

__all__ = [
    "add_months",
    "classify_status",
    "compute_periodic_payment",
    "due_soon_count",
    "generate_schedule",
    "overdue_count",
    "quote_loan",
    "settled_count",
    "status_breakdown",
]
