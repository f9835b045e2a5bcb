"""In-memory loan storage."""

from loan_ledger.store.ledger import LoanLedger

__all__ = ["LoanLedger"]
