"""
Database engine, session management, and base model.

The ledger lives entirely in memory: the default DATABASE_URL is
an in-memory SQLite database, and StaticPool keeps a single
connection open so every session sees the same data for the
lifetime of the process.
"""

import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from finapi.config import get_settings

settings = get_settings()

# --- Engine ---
# An in-memory SQLite database exists only as long as its
# connection does, so all sessions must share one connection.
# check_same_thread=False lets FastAPI's threadpool use it.
engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# --- Session Factory ---
# autocommit=False means we explicitly control when changes
# are saved. autoflush=False means nothing reaches the database
# until we flush or commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# --- Ledger Lock ---
# Sync endpoints and dependencies run in a threadpool, and every
# session shares the one DBAPI connection, so a rollback from any
# session would discard another session's uncommitted flush.
# Every use of a session (queries, flush plus commit, building
# the response, close) runs while holding this lock. It is
# never held across a threadpool hop.
ledger_lock = threading.Lock()


class Base(DeclarativeBase):
    pass


def init_db() -> None:
    """Create all tables. Called once at application startup."""
    Base.metadata.create_all(bind=engine)


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally pattern guarantees the session is closed
    when the request finishes, even if an error occurs. Closing
    rolls back the shared connection, so it takes the lock.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        with ledger_lock:
            db.close()
