"""
Database models package.

All models must be imported here so that Base.metadata knows
every table before init_db() creates them.
"""

from finapi.models.base import Base
from finapi.models.enums import EntryType
from finapi.models.customer import Customer
from finapi.models.statement_entry import StatementEntry

__all__ = [
    "Base",
    "EntryType",
    "Customer",
    "StatementEntry",
]
