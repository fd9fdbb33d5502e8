"""Business logic services."""

from finapi.services.ledger_service import LedgerService, calculate_balance

__all__ = ["LedgerService", "calculate_balance"]
