"""Serialization of ledger entities to JSON-ready dictionaries."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from loan_ledger.engine.status import DUE_SOON_DAYS, classify_status, status_breakdown
from loan_ledger.models import Loan

CENT = Decimal("0.01")


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def round_money(value: Decimal) -> Decimal:
    """Round to cents for display."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def loan_to_dict(loan: Loan, as_of: date | datetime, due_soon_days: int = DUE_SOON_DAYS) -> dict:
    """Serialize a loan with display-rounded money and per-installment status.

    Parameters
    ----------
    loan : Loan
        Loan to serialize.
    as_of : date | datetime
        Reference date for installment statuses.
    due_soon_days : int
        Window for the due-soon status.

    Returns
    -------
    dict
        JSON-ready dictionary with a ``schedule`` list and a ``status_counts``
        mapping.
    """
    schedule = [
        {
            "sequence_number": inst.sequence_number,
            "due_date": serialize_value(inst.due_date),
            "amount": str(round_money(inst.amount)),
            "is_settled": inst.is_settled,
            "settled_on": serialize_value(inst.settled_on),
            "status": classify_status(inst, as_of, due_soon_days).value,
        }
        for inst in loan.schedule
    ]
    return {
        "loan_id": loan.loan_id,
        "client_name": loan.client_name,
        "client_email": loan.client_email,
        "client_phone": loan.client_phone,
        "principal": str(round_money(loan.principal)),
        "term_months": loan.term_months,
        "monthly_rate_percent": serialize_value(loan.monthly_rate_percent),
        "periodic_payment": str(round_money(loan.periodic_payment)),
        "total_payable": str(round_money(loan.total_payable)),
        "total_interest": str(round_money(loan.total_interest)),
        "created_at": serialize_value(loan.created_at),
        "schedule": schedule,
        "status_counts": serialize_value(status_breakdown(loan, as_of, due_soon_days)),
    }
