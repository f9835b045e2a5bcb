"""Logging setup for loan-ledger.

Ledger events pass ``loan_id`` and ``sequence_number`` through ``extra``.
Both handlers render them: the standard format as a ``[loan#seq]`` tag,
the JSON format as top-level keys.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

CONTEXT_FIELDS = ("loan_id", "sequence_number")

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(ledger_ref)s%(message)s"


class LedgerContextFilter(logging.Filter):
    """Fill in the ledger context every record is formatted with."""

    def filter(self, record: logging.LogRecord) -> bool:
        loan_id = getattr(record, "loan_id", None)
        sequence_number = getattr(record, "sequence_number", None)
        if loan_id is None:
            record.ledger_ref = ""
        elif sequence_number is None:
            record.ledger_ref = f"[{loan_id}] "
        else:
            record.ledger_ref = f"[{loan_id}#{sequence_number}] "
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, ledger context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Send loan-ledger logs to stdout.

    Parameters
    ----------
    level : str
        Log level name; unknown names fall back to INFO.
    format_type : str
        "standard" for pipe-separated lines, "json" for one object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(LedgerContextFilter())
    root_logger.addHandler(console_handler)

    logging.getLogger("loan_ledger").setLevel(log_level)
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
