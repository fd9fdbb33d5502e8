"""
Request dependencies shared by the ledger routers.
"""

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from finapi.models.base import get_db, ledger_lock
from finapi.models.customer import Customer
from finapi.services.ledger_service import LedgerService


def resolve_customer(
    cpf: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> Customer:
    """
    Resolve the customer named by the ``cpf`` header.

    Every customer-bound endpoint depends on this. FastAPI caches
    get_db per request, so the customer is attached to the same
    session the endpoint receives.
    """
    service = LedgerService(db)
    with ledger_lock:
        try:
            return service.get_customer_by_cpf(cpf)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
