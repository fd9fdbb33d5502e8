"""
Pydantic schemas for customer account operations.
"""

import uuid

from pydantic import AliasChoices, BaseModel, Field

from finapi.schemas.statement import StatementEntryResponse


class AccountCreate(BaseModel):
    """Request to register a new customer."""
    cpf: str
    name: str


class AccountUpdate(BaseModel):
    """Request to rename an existing customer."""
    name: str


class CustomerResponse(BaseModel):
    id: uuid.UUID = Field(validation_alias=AliasChoices("external_id", "id"))
    cpf: str
    name: str
    statement: list[StatementEntryResponse]

    model_config = {"from_attributes": True}
