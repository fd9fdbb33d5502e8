"""
Liveness probe for the FinAPI process.

The ledger keeps everything in one in-memory SQLite connection,
so "healthy" means that connection still answers a query.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from finapi.models.base import get_db, ledger_lock

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Report whether the in-memory store responds to SELECT 1."""
    try:
        with ledger_lock:
            db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "finapi",
        "database": db_status,
    }
