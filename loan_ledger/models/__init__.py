"""Domain models for installment loans."""

from loan_ledger.models.enums import InstallmentStatus
from loan_ledger.models.loan import Installment, Loan, LoanQuote, LoanRequest

__all__ = [
    "Installment",
    "InstallmentStatus",
    "Loan",
    "LoanQuote",
    "LoanRequest",
]
