"""Enumeration types for loan entities."""

from enum import Enum


class InstallmentStatus(str, Enum):
    SETTLED = "SETTLED"
    OVERDUE = "OVERDUE"
    DUE_SOON = "DUE_SOON"
    PENDING = "PENDING"
