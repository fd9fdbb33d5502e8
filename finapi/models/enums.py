"""
Shared enumerations for database models.
"""

import enum


class EntryType(str, enum.Enum):
    """Direction of a statement entry."""
    CREDIT = "credit"
    DEBIT = "debit"
