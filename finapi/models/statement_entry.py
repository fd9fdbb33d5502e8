"""
Statement entry model.

Each entry is a single credit or debit against one customer.
Entries are immutable: once appended they are never modified,
only removed together with their customer.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Text, DateTime, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finapi.models.base import Base
from finapi.models.enums import EntryType
from finapi.models.types import DecimalString


class StatementEntry(Base):
    """
    An immutable credit or debit on a customer's statement.

    created_at is stamped server-side in local time, since
    statement-by-date queries compare calendar days as the
    server sees them.
    """

    __tablename__ = "statement_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    customer_id: Mapped[int] = mapped_column(
        ForeignKey("customers.id"), nullable=False, index=True
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(EntryType, name="entry_type_enum"),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        DecimalString, nullable=False
    )
    description: Mapped[str | None] = mapped_column(
        Text, nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now
    )

    customer: Mapped["Customer"] = relationship(
        back_populates="statement"
    )

    def __repr__(self) -> str:
        return f"<StatementEntry {self.entry_type.value} {self.amount}>"
