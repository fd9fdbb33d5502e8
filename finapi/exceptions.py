"""
Domain errors raised by the ledger service.

They subclass ValueError so the API layer can treat every
business-rule violation the same way: roll back and answer 400.
"""


class LedgerError(ValueError):
    """Base class for all ledger rule violations."""

    message = "Ledger error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class CustomerNotFound(LedgerError):
    """No customer matches the supplied cpf."""

    message = "Customer not found"


class DuplicateCustomer(LedgerError):
    """A customer with the same cpf is already registered."""

    message = "Customer already exists"


class InsufficientFunds(LedgerError):
    """Withdrawal amount exceeds the current balance."""

    message = "Insufficient funds"
