#!/usr/bin/env python3
"""Simulate a loan ledger with synthetic clients.

Creates loans from generated requests, settles the installments that would
have fallen due by a chosen date, then prints the portfolio summary and the
newest loans as JSON.

Usage:
    python scripts/simulate_ledger.py
    python scripts/simulate_ledger.py --loans 20 --months-elapsed 5 --seed 7
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_ledger.config import LedgerConfig
from loan_ledger.engine.schedule import add_months
from loan_ledger.generators import LoanRequestGenerator
from loan_ledger.logging import setup_logging
from loan_ledger.sinks import loan_to_dict, to_dict
from loan_ledger.store import LoanLedger

logger = logging.getLogger(__name__)


def populate(ledger: LoanLedger, count: int, now: datetime, seed: int | None) -> None:
    """Create ``count`` synthetic loans at ``now``."""
    generator = LoanRequestGenerator(seed=seed, config=ledger.config)
    for request in generator.generate_batch(count):
        ledger.create_loan(request, now)


def settle_until(ledger: LoanLedger, as_of: datetime, skip_every: int) -> int:
    """Settle installments due before ``as_of``, leaving every ``skip_every``-th loan behind."""
    settled = 0
    for position, loan in enumerate(ledger.loans):
        if skip_every and position % skip_every == 0:
            continue
        for inst in loan.schedule:
            if inst.due_date < as_of.date():
                ledger.toggle_installment(loan.loan_id, inst.sequence_number, inst.due_date)
                settled += 1
    return settled


def main() -> None:
    """Run the simulation."""
    parser = argparse.ArgumentParser(description="Simulate a loan ledger")
    parser.add_argument("--loans", type=int, default=10, help="Number of loans (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--months-elapsed",
        type=int,
        default=3,
        help="Months between creation and the reporting date (default: 3)",
    )
    parser.add_argument(
        "--skip-every",
        type=int,
        default=3,
        help="Leave every Nth loan unpaid so it shows overdue installments (0 disables)",
    )
    parser.add_argument("--show", type=int, default=2, help="Number of loans to print in full")
    args = parser.parse_args()

    config = LedgerConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    created = datetime.now().replace(microsecond=0)
    as_of = datetime.combine(add_months(created.date(), args.months_elapsed), created.time())

    ledger = LoanLedger(config)
    populate(ledger, args.loans, created, args.seed if args.seed is not None else config.seed)
    settled = settle_until(ledger, as_of, args.skip_every)
    logger.info("Settled %d installments up to %s", settled, as_of.date())

    report = {
        "as_of": as_of.date().isoformat(),
        "summary": to_dict(ledger.summary(as_of)),
        "loans": [loan_to_dict(loan, as_of, config.due_soon_days) for loan in ledger.loans[: args.show]],
    }
    print(json.dumps(report, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
