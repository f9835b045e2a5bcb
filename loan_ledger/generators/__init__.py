"""Synthetic data generators."""

from loan_ledger.generators.loan_request import LoanRequestGenerator

__all__ = ["LoanRequestGenerator"]
