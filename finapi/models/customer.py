"""
Customer model.

Represents an account holder, identified externally by their
cpf. Each customer owns exactly one statement: the ordered list
of their credit and debit entries.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from finapi.models.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)
    external_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, unique=True, nullable=False, default=uuid.uuid4
    )
    cpf: Mapped[str] = mapped_column(
        String, unique=True, nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now
    )

    # Insertion order is the statement order. Deleting the
    # customer deletes the whole statement with it.
    statement: Mapped[list["StatementEntry"]] = relationship(
        back_populates="customer",
        order_by="StatementEntry.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Customer {self.cpf} {self.name}>"
