"""Synthetic loan-request generator."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from loan_ledger.config import LedgerConfig
from loan_ledger.generators.base import BaseGenerator
from loan_ledger.models import LoanRequest


class LoanRequestGenerator(BaseGenerator):
    """Generate plausible loan-creation requests.

    Terms and rates are drawn from the configured form options so generated
    requests pass validation even when the ledger enforces them.
    """

    # Principal range in hundreds
    PRINCIPAL_RANGE = (10, 500)
    PHONE_RATE = 0.7

    def __init__(
        self,
        seed: int | None = None,
        locale: str | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        super().__init__(seed, locale or self.config.locale)

    def generate(self) -> LoanRequest:
        """Generate a single loan request.

        Returns
        -------
        LoanRequest
            Request with string-typed numeric fields, as a form submits them.
        """
        principal = Decimal(self.fake.random_int(*self.PRINCIPAL_RANGE) * 100)
        has_phone = self.fake.random.random() < self.PHONE_RATE

        return LoanRequest(
            client_name=self.fake.name(),
            client_email=self.fake.email(),
            client_phone=self.fake.phone_number() if has_phone else None,
            principal=str(principal),
            term_months=str(self.fake.random_element(self.config.term_options)),
            monthly_rate_percent=str(self.fake.random_element(self.config.rate_options)),
        )

    def generate_batch(self, count: int) -> Iterator[LoanRequest]:
        """Generate ``count`` loan requests.

        Parameters
        ----------
        count : int
            Number of requests to generate.

        Yields
        ------
        LoanRequest
            Generated requests.
        """
        for _ in range(count):
            yield self.generate()
