"""
Statement API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting, the ledger lock) and delegates all
business logic to the LedgerService.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from finapi.api.dependencies import resolve_customer
from finapi.models.base import get_db, ledger_lock
from finapi.models.customer import Customer
from finapi.services.ledger_service import LedgerService
from finapi.schemas.statement import (
    DepositRequest,
    WithdrawRequest,
    StatementEntryResponse,
)

router = APIRouter(tags=["Statement"])


@router.get("/statement", response_model=list[StatementEntryResponse])
def get_statement(
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """Get the full statement, oldest entry first."""
    with ledger_lock:
        entries = LedgerService(db).get_statement(customer)
        return [StatementEntryResponse.model_validate(e) for e in entries]


@router.get("/statement/date", response_model=list[StatementEntryResponse])
def get_statement_by_date(
    day: date = Query(alias="date"),
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """Get the entries created on one calendar day (YYYY-MM-DD)."""
    with ledger_lock:
        entries = LedgerService(db).get_statement_by_date(customer, day)
        return [StatementEntryResponse.model_validate(e) for e in entries]


@router.post("/deposit", status_code=201, response_class=Response)
def deposit(
    request: DepositRequest,
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """Credit the customer's statement."""
    service = LedgerService(db)
    with ledger_lock:
        service.deposit(customer, request)
        db.commit()
    return Response(status_code=201)


@router.post("/withdraw", status_code=201, response_class=Response)
def withdraw(
    request: WithdrawRequest,
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """
    Debit the customer's statement.

    The balance check and the debit happen under the ledger
    lock, so two concurrent withdrawals cannot both pass.
    """
    service = LedgerService(db)
    with ledger_lock:
        try:
            service.withdraw(customer, request)
            db.commit()
        except ValueError as e:
            db.rollback()
            raise HTTPException(status_code=400, detail=str(e))
    return Response(status_code=201)


@router.get("/balance", response_model=float)
def get_balance(
    customer: Customer = Depends(resolve_customer),
    db: Session = Depends(get_db),
):
    """Get the balance folded from the statement, as a bare number."""
    with ledger_lock:
        return float(LedgerService(db).get_balance(customer))
