"""
Pydantic schemas for statement operations.

Amounts are accepted verbatim: a zero or negative deposit is
recorded as sent. Amounts go out as plain JSON numbers.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field

from finapi.models.enums import EntryType


# --- Request Schemas ---

class DepositRequest(BaseModel):
    description: str | None = None
    amount: Decimal


class WithdrawRequest(BaseModel):
    amount: Decimal


# --- Response Schemas ---

class StatementEntryResponse(BaseModel):
    """Single statement entry in API responses."""
    description: str | None
    amount: float
    created_at: datetime
    type: EntryType = Field(validation_alias=AliasChoices("entry_type", "type"))

    model_config = {"from_attributes": True}
