"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from loan_ledger.models import LoanRequest
from loan_ledger.store import LoanLedger


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def created_at() -> datetime:
    """Loan creation timestamp."""
    return datetime(2024, 1, 15, 10, 30)


@pytest.fixture
def sample_request() -> LoanRequest:
    """Form-style request: numeric fields as strings."""
    return LoanRequest(
        client_name="Ana García",
        client_email="ana@example.com",
        client_phone="+34 600 000 000",
        principal="10000",
        term_months="12",
        monthly_rate_percent="15",
    )


@pytest.fixture
def ledger() -> LoanLedger:
    """Fresh ledger with sequential ids."""
    counter = iter(range(1, 10_000))
    return LoanLedger(id_factory=lambda: f"loan-{next(counter):03d}")
