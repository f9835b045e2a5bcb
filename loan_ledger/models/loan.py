"""Loan models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any


@dataclass
class Installment:
    """One scheduled payment within a loan.

    ``settled_on`` is set exactly when ``is_settled`` is true.
    """

    sequence_number: int  # 1, 2, 3, ...
    due_date: date
    amount: Decimal
    is_settled: bool = False
    settled_on: date | None = None


@dataclass
class Loan:
    """Fixed-rate installment loan with its full payment schedule."""

    loan_id: str
    client_name: str
    client_email: str
    client_phone: str | None
    principal: Decimal  # Amount borrowed
    term_months: int
    monthly_rate_percent: Decimal  # 15 means 15% per month
    periodic_payment: Decimal
    total_payable: Decimal
    created_at: datetime
    schedule: list[Installment] = field(default_factory=list)

    @property
    def total_interest(self) -> Decimal:
        return self.total_payable - self.principal

    def installment(self, sequence_number: int) -> Installment | None:
        """Return the installment with ``sequence_number``, if any."""
        if 1 <= sequence_number <= len(self.schedule):
            candidate = self.schedule[sequence_number - 1]
            if candidate.sequence_number == sequence_number:
                return candidate
        for inst in self.schedule:
            if inst.sequence_number == sequence_number:
                return inst
        return None


@dataclass
class LoanRequest:
    """Loan-creation request as submitted by the form layer.

    Numeric fields are left untyped: the form hands over strings, tests and
    scripts usually pass numbers.
    """

    client_name: str
    client_email: str
    principal: Any
    term_months: Any
    monthly_rate_percent: Any
    client_phone: str | None = None


@dataclass
class LoanQuote:
    """Payment preview computed before a loan is created."""

    periodic_payment: Decimal
    total_payable: Decimal
    total_interest: Decimal
