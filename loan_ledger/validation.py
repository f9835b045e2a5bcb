"""Parsing and validation of loan-creation requests."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from loan_ledger.exceptions import ValidationError
from loan_ledger.models import LoanRequest


@dataclass
class ValidatedLoan:
    """Loan request with parsed, checked values."""

    client_name: str
    client_email: str
    client_phone: str | None
    principal: Decimal
    term_months: int
    monthly_rate_percent: Decimal


def parse_amount(value: Any, field_name: str) -> Decimal:
    """Parse a numeric form value into a finite ``Decimal``.

    Strings may carry surrounding whitespace and thousands commas.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        if isinstance(value, str):
            cleaned = value.strip().replace(",", "")
            if not cleaned:
                raise ValidationError(f"{field_name} is required")
            amount = Decimal(cleaned)
        elif isinstance(value, Decimal):
            amount = value
        else:
            amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"{field_name} must be numeric, got {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a finite number, got {value!r}")
    return amount


def parse_term(value: Any) -> int:
    """Parse the number of months, which must be a whole number."""
    amount = parse_amount(value, "term_months")
    if amount != amount.to_integral_value():
        raise ValidationError(f"term_months must be a whole number, got {value!r}")
    return int(amount)


def _required_text(value: str | None, field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


def validate_loan_request(
    request: LoanRequest,
    *,
    allowed_terms: Collection[int] | None = None,
    allowed_rates: Collection[int] | None = None,
) -> ValidatedLoan:
    """Check a request and return its parsed values.

    Parameters
    ----------
    request : LoanRequest
        Raw request from the form layer.
    allowed_terms : Collection[int] | None
        When given, the term must be one of these values.
    allowed_rates : Collection[int] | None
        When given, the monthly rate must be one of these values.

    Raises
    ------
    ValidationError
        On the first missing or invalid field.
    """
    client_name = _required_text(request.client_name, "client_name")
    client_email = _required_text(request.client_email, "client_email")
    client_phone = (request.client_phone or "").strip() or None

    principal = parse_amount(request.principal, "principal")
    if principal <= 0:
        raise ValidationError(f"principal must be positive, got {principal}")

    term_months = parse_term(request.term_months)
    if term_months <= 0:
        raise ValidationError(f"term_months must be positive, got {term_months}")

    rate = parse_amount(request.monthly_rate_percent, "monthly_rate_percent")
    if rate < 0:
        raise ValidationError(f"monthly_rate_percent must not be negative, got {rate}")

    if allowed_terms is not None and term_months not in allowed_terms:
        raise ValidationError(f"term_months must be one of {sorted(allowed_terms)}, got {term_months}")
    if allowed_rates is not None and rate not in {Decimal(r) for r in allowed_rates}:
        raise ValidationError(f"monthly_rate_percent must be one of {sorted(allowed_rates)}, got {rate}")

    return ValidatedLoan(
        client_name=client_name,
        client_email=client_email,
        client_phone=client_phone,
        principal=principal,
        term_months=term_months,
        monthly_rate_percent=rate,
    )
