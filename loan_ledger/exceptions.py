"""Custom exception hierarchy for loan-ledger."""


class LoanLedgerError(Exception):
    """Base exception for all loan-ledger errors."""


class ValidationError(LoanLedgerError):
    """Raised when a loan-creation request is missing or has invalid fields."""


class InvalidArgumentError(LoanLedgerError):
    """Raised when an engine function receives an unusable argument."""


class NotFoundError(LoanLedgerError):
    """Raised when a referenced entity does not exist."""


class LoanNotFoundError(NotFoundError):
    """Raised when no loan matches the given id."""


class InstallmentNotFoundError(NotFoundError):
    """Raised when a loan has no installment with the given sequence number."""


class ConfigurationError(LoanLedgerError):
    """Raised when configuration is invalid or missing."""
