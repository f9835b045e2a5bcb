"""Tests for custom exception hierarchy."""

from loan_ledger.exceptions import (
    ConfigurationError,
    InstallmentNotFoundError,
    InvalidArgumentError,
    LoanLedgerError,
    LoanNotFoundError,
    NotFoundError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(LoanLedgerError("test"), Exception)

    def test_validation_error_is_ledger_error(self) -> None:
        assert isinstance(ValidationError("test"), LoanLedgerError)

    def test_invalid_argument_is_ledger_error(self) -> None:
        assert isinstance(InvalidArgumentError("test"), LoanLedgerError)

    def test_loan_not_found_is_not_found(self) -> None:
        err = LoanNotFoundError("test")
        assert isinstance(err, NotFoundError)
        assert isinstance(err, LoanLedgerError)

    def test_installment_not_found_is_not_found(self) -> None:
        assert isinstance(InstallmentNotFoundError("test"), NotFoundError)

    def test_configuration_error_is_ledger_error(self) -> None:
        assert isinstance(ConfigurationError("test"), LoanLedgerError)

    def test_exception_message(self) -> None:
        err = LoanNotFoundError("Loan loan-001 not found")
        assert str(err) == "Loan loan-001 not found"
