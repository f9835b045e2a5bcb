"""In-memory loan ledger."""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable, Iterator
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from loan_ledger.config import LedgerConfig
from loan_ledger.engine.amortization import compute_periodic_payment
from loan_ledger.engine.schedule import as_date, generate_schedule
from loan_ledger.engine.status import status_breakdown
from loan_ledger.exceptions import (
    InstallmentNotFoundError,
    InvalidArgumentError,
    LoanNotFoundError,
    ValidationError,
)
from loan_ledger.models import Installment, InstallmentStatus, Loan, LoanRequest
from loan_ledger.validation import validate_loan_request

logger = logging.getLogger(__name__)


def _uuid_id() -> str:
    return str(uuid.uuid4())


class LoanLedger:
    """Process-lifetime collection of loans, newest first.

    Creating loans and toggling installments are the only mutations; both run
    under a single writer lock. Readers get tuples of the committed state.

    Parameters
    ----------
    config : LedgerConfig | None
        Ledger configuration (due-soon window, form options).
    id_factory : Callable[[], str] | None
        Produces loan ids. Defaults to random UUID4 strings.
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self._id_factory = id_factory or _uuid_id
        self._loans: list[Loan] = []
        self._index: dict[str, Loan] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._loans)

    def __iter__(self) -> Iterator[Loan]:
        return iter(self.loans)

    @property
    def loans(self) -> tuple[Loan, ...]:
        """All loans, newest first."""
        return tuple(self._loans)

    def create_loan(self, request: LoanRequest, now: datetime) -> Loan:
        """Validate ``request`` and add the resulting loan to the ledger.

        Parameters
        ----------
        request : LoanRequest
            Client details and loan terms.
        now : datetime
            Creation timestamp; the schedule starts from its date.

        Returns
        -------
        Loan
            The new loan, already stored at the front of the ledger.

        Raises
        ------
        ValidationError
            If a field is missing or invalid, or the terms cannot be
            scheduled. The ledger is left unchanged.
        """
        enforce = self.config.enforce_form_options
        try:
            valid = validate_loan_request(
                request,
                allowed_terms=self.config.term_options if enforce else None,
                allowed_rates=self.config.rate_options if enforce else None,
            )
        except ValidationError as exc:
            logger.warning("Rejected loan request: %s", exc)
            raise

        try:
            payment = compute_periodic_payment(
                valid.principal, valid.monthly_rate_percent, valid.term_months
            )
            schedule = generate_schedule(now, payment, valid.term_months)
        except InvalidArgumentError as exc:
            logger.warning("Rejected loan request: %s", exc)
            raise ValidationError(str(exc)) from exc

        with self._lock:
            loan_id = self._id_factory()
            if loan_id in self._index:
                raise ValidationError(f"Loan id {loan_id} is already in use")

            loan = Loan(
                loan_id=loan_id,
                client_name=valid.client_name,
                client_email=valid.client_email,
                client_phone=valid.client_phone,
                principal=valid.principal,
                term_months=valid.term_months,
                monthly_rate_percent=valid.monthly_rate_percent,
                periodic_payment=payment,
                total_payable=payment * valid.term_months,
                created_at=now,
                schedule=schedule,
            )
            self._loans.insert(0, loan)
            self._index[loan_id] = loan

        logger.info(
            "Created loan %s: principal=%s term=%d rate=%s%% payment=%.2f",
            loan.loan_id,
            loan.principal,
            loan.term_months,
            loan.monthly_rate_percent,
            loan.periodic_payment,
            extra={"loan_id": loan.loan_id},
        )
        return loan

    def get_loan(self, loan_id: str) -> Loan:
        """Return the loan with ``loan_id``."""
        try:
            return self._index[loan_id]
        except KeyError:
            raise LoanNotFoundError(f"Loan {loan_id} not found") from None

    def toggle_installment(self, loan_id: str, sequence_number: int, now: date | datetime) -> Installment:
        """Flip the settled flag of one installment.

        Settling records ``now`` as the settlement date; unsettling clears
        it. Toggling twice restores the original state.

        Raises
        ------
        LoanNotFoundError
            If no loan has ``loan_id``.
        InstallmentNotFoundError
            If the loan has no installment ``sequence_number``.
        """
        with self._lock:
            loan = self.get_loan(loan_id)
            installment = loan.installment(sequence_number)
            if installment is None:
                raise InstallmentNotFoundError(
                    f"Loan {loan_id} has no installment #{sequence_number}"
                )

            if installment.is_settled:
                installment.is_settled = False
                installment.settled_on = None
            else:
                installment.is_settled = True
                installment.settled_on = as_date(now)

        logger.debug(
            "Installment #%d of loan %s settled=%s",
            sequence_number,
            loan_id,
            installment.is_settled,
            extra={"loan_id": loan_id, "sequence_number": sequence_number},
        )
        return installment

    def summary(self, as_of: date | datetime) -> dict[str, Any]:
        """Return portfolio counts and money totals as of a date."""
        with self._lock:
            loans = self.loans

        counts = {status: 0 for status in InstallmentStatus}
        for loan in loans:
            for status, count in status_breakdown(loan, as_of, self.config.due_soon_days).items():
                counts[status] += count

        total_principal = sum((loan.principal for loan in loans), Decimal(0))
        total_payable = sum((loan.total_payable for loan in loans), Decimal(0))
        return {
            "loans": len(loans),
            "installments": sum(len(loan.schedule) for loan in loans),
            "settled": counts[InstallmentStatus.SETTLED],
            "overdue": counts[InstallmentStatus.OVERDUE],
            "due_soon": counts[InstallmentStatus.DUE_SOON],
            "pending": counts[InstallmentStatus.PENDING],
            "total_principal": total_principal,
            "total_payable": total_payable,
            "total_interest": total_payable - total_principal,
        }
