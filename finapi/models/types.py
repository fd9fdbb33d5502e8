"""
Custom column types.

SQLite has no exact decimal type: Numeric goes through float and
is rounded to its scale. Amounts are stored as their decimal
string instead, so every digit sent is the digit read back.
"""

from decimal import Decimal

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class DecimalString(TypeDecorator):
    """A Decimal persisted as its exact string form."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(str(value)))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)
