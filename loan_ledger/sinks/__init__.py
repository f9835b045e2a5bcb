"""Output helpers for exporting ledger data."""

from loan_ledger.sinks.serialization import loan_to_dict, serialize_value, to_dict

__all__ = ["loan_to_dict", "serialize_value", "to_dict"]
