"""
Customer account API endpoints.

Handlers touch the session only while holding ledger_lock, and
build their response models before releasing it.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from finapi.api.dependencies import resolve_customer
from finapi.models.base import get_db, ledger_lock
from finapi.models.customer import Customer
from finapi.services.ledger_service import LedgerService
from finapi.schemas.customer import (
    AccountCreate,
    AccountUpdate,
    CustomerResponse,
)

router = APIRouter(prefix="/account", tags=["Accounts"])


@router.post("", status_code=201, response_class=Response)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """
    Register a new customer.

    This is the only endpoint that does not require an
    existing customer. A cpf can only be registered once.
    """
    service = LedgerService(db)
    with ledger_lock:
        try:
            service.create_account(request)
            db.commit()
        except ValueError as e:
            db.rollback()
            raise HTTPException(status_code=400, detail=str(e))
    return Response(status_code=201)


@router.get("", response_model=CustomerResponse)
def get_account(customer: Customer = Depends(resolve_customer)):
    """Get the customer record, statement included."""
    with ledger_lock:
        return CustomerResponse.model_validate(customer)


@router.put("", status_code=201, response_class=Response)
def rename_account(
    request: AccountUpdate,
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """Change the customer's name."""
    service = LedgerService(db)
    with ledger_lock:
        service.rename_account(customer, request)
        db.commit()
    return Response(status_code=201)


@router.delete("", response_model=list[CustomerResponse])
def delete_account(
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """
    Delete the customer and their statement.

    Responds with the customers that remain.
    """
    service = LedgerService(db)
    with ledger_lock:
        remaining = service.delete_account(customer)
        db.commit()
        return [CustomerResponse.model_validate(c) for c in remaining]
