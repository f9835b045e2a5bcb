"""loan-ledger: fixed-rate installment loans, schedules and settlement tracking."""

__version__ = "0.1.0"
